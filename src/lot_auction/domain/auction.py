"""Auction configuration and bid resolution.

This module defines the Auction value object, the strategy selector,
and the builder used to assemble auctions with defaults.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from .models import Bid, Sales
from .pricing_strategies import multi_price, single_price

logger = logging.getLogger(__name__)


class AuctionStrategy(str, Enum):
    """Pricing rule used to resolve an auction.

    Attributes
    ----------
    SINGLE_PRICE : str
        All winners pay one uniform clearing price, the lowest winning
        bid amount.
    MULTI_PRICE : str
        Pay-as-bid. Each winner pays its own bid amount.
    """

    SINGLE_PRICE = "single_price"
    MULTI_PRICE = "multi_price"


DEFAULT_LOTS = 1
DEFAULT_RESERVE_PRICE = 0
DEFAULT_STRATEGY = AuctionStrategy.SINGLE_PRICE


@dataclass(frozen=True)
class Auction:
    """
    Immutable configuration for resolving a set of bids.

    Parameters
    ----------
    lots : int, default=1
        Total units for sale.
    reserve_price : int, default=0
        Minimum acceptable per-unit amount. Bids strictly below it never
        win.
    strategy : AuctionStrategy, default=AuctionStrategy.SINGLE_PRICE
        Pricing rule applied to the winning bids.

    Notes
    -----
    No validation is performed. Negative lots or reserve prices are
    accepted as-is and resolve deterministically, but the results are
    not meaningful. Supplying sane values is the caller's job.

    An auction holds no state between resolutions, so one instance can
    resolve any number of bid sets, from any number of threads, as long
    as each call gets its own bid collection.

    Examples
    --------
    >>> auction = AuctionBuilder().lots(2).reserve_price(50).build()
    >>> sales = auction.resolve_bids([Bid(55, 1), Bid(20, 1)])
    >>> [(sale.amount, sale.quantity) for sale in sales]
    [(55, 1)]
    """

    lots: int = DEFAULT_LOTS
    reserve_price: int = DEFAULT_RESERVE_PRICE
    strategy: AuctionStrategy = DEFAULT_STRATEGY

    def __post_init__(self):
        """Convert a strategy name to its enum member."""
        if not isinstance(self.strategy, AuctionStrategy):
            object.__setattr__(
                self, "strategy", AuctionStrategy(self.strategy)
            )

    def resolve_bids(self, bids: Iterable[Bid]) -> Sales:
        """Resolve bids against this auction.

        Parameters
        ----------
        bids : Iterable[Bid]
            The bids to resolve, in any order. The collection is copied,
            never mutated.

        Returns
        -------
        Sales
            Sales in acceptance order, highest bid first. Empty when no
            bid wins; resolution never raises.
        """
        bids = list(bids)

        if self.strategy == AuctionStrategy.SINGLE_PRICE:
            sales = single_price(self, bids)
        elif self.strategy == AuctionStrategy.MULTI_PRICE:
            sales = multi_price(self, bids)
        else:
            raise AssertionError(
                f"Unhandled auction strategy: {self.strategy}"
            )

        logger.info(
            f"Resolved {len(bids)} bids with {self.strategy.value}: "
            f"{len(sales)} sales, "
            f"{sum(sale.quantity for sale in sales)}/{self.lots} lots sold"
        )
        return sales


class AuctionBuilder:
    """Fluent builder for Auction objects.

    Any field left unset takes its default when ``build`` is called:
    one lot, a reserve price of zero, and the single price strategy.

    Examples
    --------
    >>> auction = (
    ...     AuctionBuilder()
    ...     .lots(10)
    ...     .reserve_price(50)
    ...     .strategy(AuctionStrategy.MULTI_PRICE)
    ...     .build()
    ... )
    >>> auction.lots
    10
    """

    def __init__(self):
        self._lots: int = DEFAULT_LOTS
        self._reserve_price: Optional[int] = None
        self._strategy: Optional[AuctionStrategy] = None

    def lots(self, lots: int) -> "AuctionBuilder":
        """Set the number of lots for sale."""
        self._lots = lots
        return self

    def reserve_price(self, reserve_price: int) -> "AuctionBuilder":
        """Set the reserve price of the auction."""
        self._reserve_price = reserve_price
        return self

    def strategy(self, strategy: AuctionStrategy) -> "AuctionBuilder":
        """Set the pricing strategy of the auction."""
        self._strategy = strategy
        return self

    def build(self) -> Auction:
        """Build the auction, applying defaults for unset fields."""
        return Auction(
            lots=self._lots,
            reserve_price=(
                self._reserve_price
                if self._reserve_price is not None
                else DEFAULT_RESERVE_PRICE
            ),
            strategy=(
                self._strategy
                if self._strategy is not None
                else DEFAULT_STRATEGY
            ),
        )
