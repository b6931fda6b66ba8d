"""Interactive text menu: the outer shell around the dispatcher.

Everything here is terminal I/O: prompt for typed values, build a
command, dispatch it and echo the result.  No business rule lives here.
"""

from __future__ import annotations

from collections.abc import Callable

import click

from storems.application import commands
from storems.application.dispatcher import (
    MSG_INVALID_CHOICE,
    CommandDispatcher,
    CommandResult,
)
from storems.infrastructure.cli.params import DECIMAL

MAIN_MENU = """
=== MAIN MENU ===
1. Add Product
2. Update Product
3. View Products
4. Delete Product
5. Customer Billing
6. Exit"""

BILLING_MENU = """
=== CUSTOMER BILLING MENU ===
1. View Products
2. Add Product to Bill
3. View Bill
4. Clear Bill
5. Back to Main Menu"""

REGULAR, DISCOUNTED = 1, 2


def _show(result: CommandResult) -> CommandResult:
    for line in result.output:
        click.echo(line)
    return result


# --- Main menu actions ----------------------------------------------------------


def _add_product(dispatcher: CommandDispatcher) -> CommandResult:
    product_id = click.prompt("Enter ID", type=int)
    name = click.prompt("Enter Name")
    price = click.prompt("Enter Price", type=DECIMAL)
    quantity = click.prompt("Enter Quantity", type=int)
    kind = click.prompt("Type (1-Regular, 2-Discounted)", type=int, default=REGULAR)
    discount = None
    if kind == DISCOUNTED:
        discount = click.prompt("Enter Discount %", type=DECIMAL)
    return _show(dispatcher.dispatch(
        commands.AddProduct(product_id, name, price, quantity, discount)
    ))


def _update_product(dispatcher: CommandDispatcher) -> CommandResult:
    product_id = click.prompt("Enter Product ID to update", type=int)
    name = click.prompt("Enter New Name")
    price = click.prompt("Enter New Price", type=DECIMAL)
    quantity = click.prompt("Enter New Quantity", type=int)
    return _show(dispatcher.dispatch(
        commands.UpdateProduct(product_id, name, price, quantity)
    ))


def _view_products(dispatcher: CommandDispatcher) -> CommandResult:
    return _show(dispatcher.dispatch(commands.ViewProducts()))


def _delete_product(dispatcher: CommandDispatcher) -> CommandResult:
    product_id = click.prompt("Enter Product ID to delete", type=int)
    return _show(dispatcher.dispatch(commands.DeleteProduct(product_id)))


def _billing(dispatcher: CommandDispatcher) -> CommandResult:
    dispatcher.dispatch(commands.StartBilling())
    while True:
        click.echo(BILLING_MENU)
        choice = click.prompt("Choose option", type=int)
        action = BILLING_ACTIONS.get(choice)
        if action is None:
            click.echo(MSG_INVALID_CHOICE)
            continue
        result = action(dispatcher)
        if result.done:
            return CommandResult(ok=True)


def _exit(dispatcher: CommandDispatcher) -> CommandResult:
    return _show(dispatcher.dispatch(commands.Exit()))


# --- Billing menu actions -------------------------------------------------------


def _add_to_bill(dispatcher: CommandDispatcher) -> CommandResult:
    product_id = click.prompt("Enter Product ID", type=int)
    found = dispatcher.dispatch(commands.LookupProduct(product_id))
    if not found.ok:
        return _show(found)
    quantity = click.prompt("Enter Quantity", type=int)
    return _show(dispatcher.dispatch(commands.AddToBill(product_id, quantity)))


def _view_bill(dispatcher: CommandDispatcher) -> CommandResult:
    return _show(dispatcher.dispatch(commands.ViewBill()))


def _clear_bill(dispatcher: CommandDispatcher) -> CommandResult:
    return _show(dispatcher.dispatch(commands.ClearBill()))


def _back(dispatcher: CommandDispatcher) -> CommandResult:
    result = _show(dispatcher.dispatch(commands.EndBilling()))
    return CommandResult(ok=result.ok, message=result.message, done=True)


Action = Callable[[CommandDispatcher], CommandResult]

MAIN_ACTIONS: dict[int, Action] = {
    1: _add_product,
    2: _update_product,
    3: _view_products,
    4: _delete_product,
    5: _billing,
    6: _exit,
}

BILLING_ACTIONS: dict[int, Action] = {
    1: _view_products,
    2: _add_to_bill,
    3: _view_bill,
    4: _clear_bill,
    5: _back,
}


def run_menu(dispatcher: CommandDispatcher) -> None:
    """Loop over the main menu until the user picks Exit."""
    while True:
        click.echo(MAIN_MENU)
        choice = click.prompt("Choose option", type=int)
        action = MAIN_ACTIONS.get(choice)
        if action is None:
            click.echo(MSG_INVALID_CHOICE)
            continue
        if action(dispatcher).done:
            return
