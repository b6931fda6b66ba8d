"""Composition root: builds the session and wires it to the dispatcher.

This is the only place that knows about every layer.  Settings come from
the command line (or their environment variables, see ``cli.main``).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storems.application.dispatcher import CommandDispatcher, Session
from storems.domain.model.bill import DEFAULT_TAX_RATE
from storems.domain.model.inventory import Inventory
from storems.domain.model.value_objects import Percentage

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    tax_rate: Decimal = DEFAULT_TAX_RATE.value
    log_level: str = DEFAULT_LOG_LEVEL


def new_session(settings: Settings) -> Session:
    """A fresh, empty inventory with the configured tax rate."""
    return Session(inventory=Inventory(), tax_rate=Percentage(settings.tax_rate))


def dispatcher(settings: Settings) -> CommandDispatcher:
    return CommandDispatcher(new_session(settings))
