"""Order session: the interactive sell/restock loop.

The session is a small state machine:

    AWAITING_COMMAND ──sell──▶ SELLING ─────┐
           ▲  │                             │
           │  └──restock──▶ RESTOCKING ─────┤
           └────────────────────────────────┘
    AWAITING_COMMAND ──exit──▶ EXITING (terminal)

Every sub-flow goes back to AWAITING_COMMAND when it completes or when any
input is rejected. Nothing but an exit command (or the end of input) stops
the loop.
"""

import re
from dataclasses import dataclass, replace
from enum import Enum

import structlog
from protean.exceptions import ValidationError

from stockroom.console.port import Console
from stockroom.product.inventory_service import InventoryService
from stockroom.product.product import Product
from stockroom.shared.errors import ErrorKind, first_message

logger = structlog.get_logger(__name__)

_DIGITS = re.compile(r"[0-9]+")

MENU_PROMPT = "Welcome, would you like to process an order? Please choose: Sell, Restock, or Exit"
INVALID_COMMAND = "Error: Invalid selection. Please choose: Sell, Restock, or Exit"
INVALID_PRODUCT = "Invalid product selection."
INVALID_QUANTITY = "Please enter a valid quantity."
NON_POSITIVE_QUANTITY = "Error: Quantity must be greater than 0."


class SessionState(Enum):
    AWAITING_COMMAND = "AwaitingCommand"
    SELLING = "Selling"
    RESTOCKING = "Restocking"
    EXITING = "Exiting"


class Command(Enum):
    SELL = "sell"
    RESTOCK = "restock"
    EXIT = "exit"


_NEXT_STATE = {
    Command.SELL: SessionState.SELLING,
    Command.RESTOCK: SessionState.RESTOCKING,
}


@dataclass(frozen=True)
class SessionTotals:
    """Running counters for one session. Replaced, never mutated."""

    sell_count: int = 0
    units_sold: int = 0
    restock_count: int = 0
    units_restocked: int = 0

    def record_sale(self, quantity: int) -> "SessionTotals":
        return replace(self, sell_count=self.sell_count + 1, units_sold=self.units_sold + quantity)

    def record_restock(self, quantity: int) -> "SessionTotals":
        return replace(
            self,
            restock_count=self.restock_count + 1,
            units_restocked=self.units_restocked + quantity,
        )


@dataclass(frozen=True)
class _Flow:
    """Wording and behaviour that differ between the sell and restock flows."""

    verb: str
    past_tense: str
    progress: str


_FLOWS = {
    SessionState.SELLING: _Flow(verb="sell", past_tense="Sold", progress="Processing sell..."),
    SessionState.RESTOCKING: _Flow(verb="restock", past_tense="Restocked", progress="Processing restock..."),
}


def parse_command(text: str | None) -> Command | None:
    """Normalize a menu reply to a Command, or None when it is not one."""
    if text is None:
        return None
    try:
        return Command(text.strip().casefold())
    except ValueError:
        return None


def parse_whole_number(text: str | None) -> int | None:
    """Parse an unsigned run of ASCII digits.

    Signs, decimal points and any other characters make the input invalid;
    None is returned instead of raising.
    """
    if text is None:
        return None
    stripped = text.strip()
    if not _DIGITS.fullmatch(stripped):
        return None
    try:
        return int(stripped)
    except ValueError:
        # Past the interpreter's digit limit for int conversion
        return None


def resolve_selection(text: str | None, products: list[Product]) -> Product | None:
    """Map a 1-based product number typed by the operator to a product."""
    number = parse_whole_number(text)
    if number is None or not 1 <= number <= len(products):
        return None
    return products[number - 1]


class OrderSession:
    """Drives one operator session over an in-memory product list."""

    def __init__(
        self,
        products: list[Product],
        console: Console,
        service: InventoryService | None = None,
    ) -> None:
        self.products = list(products)
        self.console = console
        self.service = service or InventoryService()
        self.state = SessionState.AWAITING_COMMAND
        self.totals = SessionTotals()

    def run(self) -> SessionTotals:
        """Process commands until exit, then print the summary."""
        logger.info("session_started", products=len(self.products))
        while self.state is not SessionState.EXITING:
            self.step()

        self._write_summary()
        logger.info(
            "session_finished",
            sell_count=self.totals.sell_count,
            units_sold=self.totals.units_sold,
            restock_count=self.totals.restock_count,
            units_restocked=self.totals.units_restocked,
        )
        return self.totals

    def step(self) -> SessionState:
        """Advance the state machine by one transition."""
        if self.state is SessionState.AWAITING_COMMAND:
            self.state = self._await_command()
        elif self.state in _FLOWS:
            self._process_order(_FLOWS[self.state])
            if self.state is not SessionState.EXITING:
                self.state = SessionState.AWAITING_COMMAND
        return self.state

    # -------------------------------------------------------------------
    # States
    # -------------------------------------------------------------------
    def _await_command(self) -> SessionState:
        self.console.write(MENU_PROMPT)
        reply = self.console.read_line()
        if reply is None:
            logger.info("input_exhausted")
            return self._exit()

        command = parse_command(reply)
        if command is None:
            logger.debug("command_rejected", reply=reply)
            self.console.write(INVALID_COMMAND)
            return SessionState.AWAITING_COMMAND

        if command is Command.EXIT:
            return self._exit()
        return _NEXT_STATE[command]

    def _process_order(self, flow: _Flow) -> None:
        self.console.write(flow.progress)
        self.console.write(f"Which product would you like to {flow.verb}? Enter the Product number:")
        self._write_inventory()

        reply = self.console.read_line()
        if reply is None:
            self.state = self._exit()
            return
        product = resolve_selection(reply, self.products)
        if product is None:
            self.console.write(INVALID_PRODUCT)
            return

        self.console.write(f"How many would you like to {flow.verb}?")
        reply = self.console.read_line()
        if reply is None:
            self.state = self._exit()
            return
        quantity = parse_whole_number(reply)
        if quantity is None:
            self.console.write(INVALID_QUANTITY)
            return
        if quantity <= 0:
            self.console.write(NON_POSITIVE_QUANTITY)
            return

        try:
            if self.state is SessionState.SELLING:
                self.service.sell_product(product, quantity)
            else:
                self.service.restock_product(product, quantity)
        except ValidationError as exc:
            kind = getattr(exc, "kind", ErrorKind.INVALID_ARGUMENT)
            logger.warning("order_rejected", flow=flow.verb, product_id=product.id, quantity=quantity, kind=kind.value)
            self.console.write(f"Error: {first_message(exc)}")
            return

        if self.state is SessionState.SELLING:
            self.totals = self.totals.record_sale(quantity)
        else:
            self.totals = self.totals.record_restock(quantity)

        self.console.write(f"{flow.past_tense} {quantity} of {product.name}.")
        self.console.write(f"{product.quantity_in_stock} remaining in stock.")

    def _exit(self) -> SessionState:
        self.console.write("Goodbye!")
        return SessionState.EXITING

    # -------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------
    def _write_inventory(self) -> None:
        for number, product in enumerate(self.products, start=1):
            self.console.write(f"No: {number}\tProduct: {product.name}\tStock: {product.quantity_in_stock}")

    def _write_summary(self) -> None:
        totals = self.totals
        self.console.write("Thank you for using Apex service: Here is a summary of your usage today")
        self.console.write(f"Number of sell operations: {totals.sell_count}")
        self.console.write(f"Total number of units sold: {totals.units_sold}")
        self.console.write(f"Number of restock operations: {totals.restock_count}")
        self.console.write(f"Total number of units restocked: {totals.units_restocked}")
        self.console.write("Have a nice day! :)")
