"""Minimum and maximum stock rules for inventory movements.

The checks are pure: they read only the values they receive, never touch the
database and never raise for a rule violation. A rejection is returned as an
immutable failure value so callers decide how to surface it (the service layer
turns it into a ``ServiceError`` for the HTTP handlers).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Literal


@dataclass(frozen=True)
class StockAccepted:
    """The requested movement keeps the stock within its limits."""

    ok: ClassVar[Literal[True]] = True


@dataclass(frozen=True)
class StockUnderLimitFailure:
    """A decrement would leave less stock than the minimum allowed."""

    item_id: Any
    quantity: int

    ok: ClassVar[Literal[False]] = False
    kind: ClassVar[str] = "stock_under_limit"

    @property
    def message(self) -> str:
        return (
            f"Beers with {self.item_id} ID to decrement informed is bellow "
            f"the min stock expected: {self.quantity}"
        )


@dataclass(frozen=True)
class StockExceededFailure:
    """An increment would push the stock above the item's capacity."""

    item_id: Any
    quantity: int

    ok: ClassVar[Literal[False]] = False
    kind: ClassVar[str] = "stock_exceeded"

    @property
    def message(self) -> str:
        return (
            f"Beers with {self.item_id} ID informed exceeds "
            f"the max stock capacity: {self.quantity}"
        )


DecrementCheck = StockAccepted | StockUnderLimitFailure
IncrementCheck = StockAccepted | StockExceededFailure

ACCEPTED = StockAccepted()


def check_decrement(
    item_id: Any,
    current_quantity: int,
    requested_decrement: int,
    minimum_allowed: int,
) -> DecrementCheck:
    """Accept the decrement when ``current - requested >= minimum_allowed``.

    The floor is inclusive. Signs are not validated here; callers reject
    non-positive quantities before asking.
    """
    if current_quantity - requested_decrement >= minimum_allowed:
        return ACCEPTED
    return StockUnderLimitFailure(item_id=item_id, quantity=requested_decrement)


def check_increment(
    item_id: Any,
    current_quantity: int,
    requested_increment: int,
    maximum_allowed: int,
) -> IncrementCheck:
    """Accept the increment when ``current + requested <= maximum_allowed``."""
    if current_quantity + requested_increment <= maximum_allowed:
        return ACCEPTED
    return StockExceededFailure(item_id=item_id, quantity=requested_increment)
