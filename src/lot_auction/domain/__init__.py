"""
Auction domain for lot-auction.

This module contains the bid and sale models, the auction configuration,
and the pricing strategies that resolve bids into sales.
"""

from .auction import Auction, AuctionBuilder, AuctionStrategy
from .models import Bid, Bids, Sale, Sales, bid
from .pricing_strategies import (
    AllocationResult,
    allocate_lots,
    multi_price,
    single_price,
)

__all__ = [
    "Auction",
    "AuctionBuilder",
    "AuctionStrategy",
    "Bid",
    "Bids",
    "Sale",
    "Sales",
    "bid",
    "AllocationResult",
    "allocate_lots",
    "single_price",
    "multi_price",
]
