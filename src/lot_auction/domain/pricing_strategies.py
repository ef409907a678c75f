"""Auction pricing strategies.

This module implements the algorithms that turn a set of bids into sales.
Both strategies share one allocation pass and differ only in how the
price of each sale is determined:

- Single price: every winner pays the same uniform clearing price, the
  amount of the lowest winning bid.
- Multi price (pay-as-bid): every winner pays its own bid amount.

Allocation
----------
Bids are ranked by amount, highest first. Equal amounts keep their input
order, so results are reproducible. Lots are then handed out greedily:

1. A bid below the reserve price ends the scan. Everything after it
   ranks the same or lower.
2. A bid that fits in the remaining lots is accepted in full.
3. A bid that does not fit is partially filled with whatever lots
   remain, and the scan ends.
4. With no lots remaining the scan ends.

Strategies are stateless. The same auction can resolve any number of
bid sets without side effects.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List

from .models import Bid, Bids, Sale, Sales

if TYPE_CHECKING:
    from .auction import Auction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AllocationResult:
    """Result of a single allocation pass.

    Attributes
    ----------
    winning_bids : List[Bid]
        Accepted bids in acceptance order, highest amount first. A
        partially filled bid appears with its reduced quantity.
    remaining_lots : int
        Lots left unallocated after the scan.
    """

    winning_bids: List[Bid]
    remaining_lots: int

    @property
    def lowest_winning_amount(self) -> int:
        """Amount of the last accepted bid.

        Raises
        ------
        IndexError
            If no bid was accepted.
        """
        return self.winning_bids[-1].amount


def allocate_lots(auction: "Auction", bids: Iterable[Bid]) -> AllocationResult:
    """Allocate the auction's lots to the highest bids.

    Parameters
    ----------
    auction : Auction
        The auction supplying ``lots`` and ``reserve_price``.
    bids : Iterable[Bid]
        Bids in any order. The iterable is consumed but never mutated.

    Returns
    -------
    AllocationResult
        The winning bids and the lots left over.

    Notes
    -----
    The reserve cutoff is strict: a bid priced exactly at the reserve is
    eligible. Once a partial fill happens no later bid is considered,
    even one small enough to fit in what would have remained.

    Examples
    --------
    >>> auction = AuctionBuilder().lots(2).build()
    >>> result = allocate_lots(auction, [Bid(10, 2), Bid(20, 1)])
    >>> [(b.amount, b.quantity) for b in result.winning_bids]
    [(20, 1), (10, 1)]
    """
    # Stable sort, so equal amounts keep their submission order
    ranked = sorted(bids, reverse=True)

    remaining_lots = auction.lots
    winning_bids: Bids = []
    for candidate in ranked:
        if candidate.amount < auction.reserve_price:
            logger.debug(
                f"Bid {candidate.id} at {candidate.amount} is below reserve "
                f"{auction.reserve_price}, stopping"
            )
            break
        if candidate.quantity <= remaining_lots:
            remaining_lots -= candidate.quantity
            winning_bids.append(candidate)
            logger.debug(
                f"Accepted bid {candidate.id}: {candidate.quantity} "
                f"@ {candidate.amount}, {remaining_lots} lots remaining"
            )
        elif remaining_lots > 0:
            winning_bids.append(candidate.with_quantity(remaining_lots))
            logger.debug(
                f"Partially filled bid {candidate.id}: {remaining_lots} of "
                f"{candidate.quantity} @ {candidate.amount}"
            )
            remaining_lots = 0
            break
        else:
            break

    return AllocationResult(
        winning_bids=winning_bids, remaining_lots=remaining_lots
    )


def single_price(auction: "Auction", bids: Iterable[Bid]) -> Sales:
    """Resolve bids into sales at a uniform clearing price.

    All winners pay the amount of the lowest winning bid.

    Parameters
    ----------
    auction : Auction
        The auction to resolve bids for.
    bids : Iterable[Bid]
        The bids to resolve.

    Returns
    -------
    Sales
        One sale per winning bid, highest bid first, all at the clearing
        price. Empty if no bid cleared the reserve.

    Examples
    --------
    >>> auction = AuctionBuilder().lots(10).build()
    >>> sales = single_price(auction, [Bid(10, 1), Bid(20, 1)])
    >>> [sale.amount for sale in sales]
    [10, 10]
    """
    allocation = allocate_lots(auction, bids)
    if not allocation.winning_bids:
        return []

    clearing_price = allocation.lowest_winning_amount
    logger.debug(f"Clearing price set at {clearing_price}")

    return [
        Sale(
            bidder_id=winner.id,
            amount=clearing_price,
            quantity=winner.quantity,
        )
        for winner in allocation.winning_bids
    ]


def multi_price(auction: "Auction", bids: Iterable[Bid]) -> Sales:
    """Resolve bids into sales where each winner pays its own bid.

    Allocation is identical to ``single_price``; only the price rule
    differs.

    Parameters
    ----------
    auction : Auction
        The auction to resolve bids for.
    bids : Iterable[Bid]
        The bids to resolve.

    Returns
    -------
    Sales
        One sale per winning bid, highest bid first, each at the bid's
        own amount. Empty if no bid cleared the reserve.
    """
    allocation = allocate_lots(auction, bids)
    return [
        Sale(
            bidder_id=winner.id,
            amount=winner.amount,
            quantity=winner.quantity,
        )
        for winner in allocation.winning_bids
    ]
