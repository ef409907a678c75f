"""Lot auction clearing.

Resolve a set of bids for a fixed supply of interchangeable units into
sales, using a uniform clearing price or pay-as-bid pricing.
"""

from .domain import (
    Auction,
    AuctionBuilder,
    AuctionStrategy,
    Bid,
    Bids,
    Sale,
    Sales,
    bid,
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
]
