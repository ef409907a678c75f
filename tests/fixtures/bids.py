"""Bid test fixtures and common auction scenarios.

This module provides factory functions and test data constants for creating
consistent bids and auctions across the test suite.
"""

from typing import List, Sequence, Tuple

from lot_auction.domain.auction import Auction, AuctionBuilder, AuctionStrategy
from lot_auction.domain.models import Bid

# Test data constants, in cents
TEST_AMOUNTS = {
    "low": 10,
    "mid": 20,
    "reserve": 50,
    "above_reserve": 55,
    "high": 100,
}

TEST_QUANTITIES = {
    "single": 1,
    "pair": 2,
    "typical": 10,
    "large": 100,
}


def create_test_bid(amount: int = 100, quantity: int = 1) -> Bid:
    """Create a test bid with configurable parameters.

    Parameters
    ----------
    amount : int, default=100
        Price per unit in cents
    quantity : int, default=1
        Number of units requested

    Returns
    -------
    Bid
        Bid with a fresh id
    """
    return Bid(amount=amount, quantity=quantity)


def create_bids(specs: Sequence[Tuple[int, int]]) -> List[Bid]:
    """Create bids from (amount, quantity) pairs, preserving order.

    Examples
    --------
    >>> bids = create_bids([(10, 1), (20, 1)])
    >>> [b.amount for b in bids]
    [10, 20]
    """
    return [
        Bid(amount=amount, quantity=quantity) for amount, quantity in specs
    ]


def create_test_auction(
    lots: int = 1,
    reserve_price: int = 0,
    strategy: AuctionStrategy = AuctionStrategy.SINGLE_PRICE,
) -> Auction:
    """Create an auction through the builder with explicit parameters."""
    return (
        AuctionBuilder()
        .lots(lots)
        .reserve_price(reserve_price)
        .strategy(strategy)
        .build()
    )
