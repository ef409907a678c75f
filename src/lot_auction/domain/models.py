"""Core auction domain models.

This module contains the value objects exchanged between callers and the
auction resolver: Bid and Sale.
"""

import uuid
from dataclasses import dataclass, field, replace
from functools import total_ordering
from typing import List


@total_ordering
@dataclass(frozen=True, eq=False)
class Bid:
    """
    Represents a request to buy units in an auction.

    A bid asks for a number of interchangeable units (lots) at a given
    per-unit price. Bids are immutable; a partially filled bid is a new
    Bid value with a reduced quantity, never a mutation.

    Parameters
    ----------
    amount : int
        Price per unit in minor currency units (e.g. cents). Any integer
        is accepted, including zero and negative values.
    quantity : int, default=1
        Number of units requested. Zero-quantity bids are accepted but
        are degenerate.
    id : uuid.UUID, optional
        Unique identifier of this bid. If not provided, a random UUID is
        generated.

    Attributes
    ----------
    amount : int
        Price per unit in minor currency units.
    quantity : int
        Number of units requested.
    id : uuid.UUID
        Unique identifier of this bid, used for traceability only.

    Notes
    -----
    Ordering and equality are defined by ``amount`` only. Two bids with
    the same amount compare equal even when their quantities and ids
    differ, because ranking only cares about price. The hash follows
    equality, so a set of bids keeps one bid per price level and cannot
    be used to recover distinct bids. Use ``id`` (or ``is_same_bid``)
    when identity matters.

    The ``id`` is not a bidder identity: one bidder submitting two bids
    produces two unrelated ids.

    Examples
    --------
    >>> high = Bid(amount=20, quantity=1)
    >>> low = Bid(amount=10, quantity=5)
    >>> high > low
    True
    >>> Bid(amount=10, quantity=1) == Bid(amount=10, quantity=3)
    True
    """

    amount: int
    quantity: int = 1
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bid):
            return NotImplemented
        return self.amount == other.amount

    def __lt__(self, other: "Bid") -> bool:
        if not isinstance(other, Bid):
            return NotImplemented
        return self.amount < other.amount

    def __hash__(self) -> int:
        return hash(self.amount)

    def is_same_bid(self, other: "Bid") -> bool:
        """
        Check whether two bids share the same identity.

        Parameters
        ----------
        other : Bid
            The bid to compare against.

        Returns
        -------
        bool
            True if both bids carry the same ``id``.
        """
        return self.id == other.id

    def with_quantity(self, quantity: int) -> "Bid":
        """
        Create a copy of this bid with a different quantity.

        Used for partial fills: the copy keeps the bid's ``id`` and
        ``amount`` so the resulting sale can be traced to the bid.

        Parameters
        ----------
        quantity : int
            Quantity of the new bid.

        Returns
        -------
        Bid
            A new bid; this bid is left unchanged.
        """
        return replace(self, quantity=quantity)


def bid(amount: int, quantity: int = 1) -> Bid:
    """Create a bid with a freshly generated id."""
    return Bid(amount=amount, quantity=quantity)


@dataclass(frozen=True)
class Sale:
    r"""
    Represents the outcome of a winning bid.

    Parameters
    ----------
    bidder_id : uuid.UUID
        The ``id`` of the winning bid. Despite the name, this identifies
        the bid, not a bidder.
    amount : int
        Price charged per unit, as determined by the auction strategy.
    quantity : int
        Units awarded. May be less than the bid requested when the bid
        was partially filled.

    Notes
    -----
    The total value of a sale is:

    $$\text{Value} = \text{Amount} \times \text{Quantity}$$

    Examples
    --------
    >>> sale = Sale(bidder_id=uuid.uuid4(), amount=10, quantity=3)
    >>> sale.value
    30
    """

    bidder_id: uuid.UUID
    amount: int
    quantity: int

    @property
    def value(self) -> int:
        """
        Calculate the total value of this sale.

        Returns
        -------
        int
            The sale value (amount * quantity) in minor currency units.
        """
        return self.amount * self.quantity


Bids = List[Bid]
Sales = List[Sale]
