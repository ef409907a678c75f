"""Test fixtures for lot-auction.

This module provides reusable test data creators for bids and auctions.
All fixtures follow a consistent pattern:
- Sensible defaults that can be overridden
- Common test scenarios as helper functions
- Test data constants for typical values

Example usage:
    >>> from tests.fixtures import create_bids, create_test_auction
    >>>
    >>> auction = create_test_auction(lots=2)
    >>> sales = auction.resolve_bids(create_bids([(10, 2), (20, 1)]))
"""

from .bids import (
    TEST_AMOUNTS,
    TEST_QUANTITIES,
    create_bids,
    create_test_auction,
    create_test_bid,
)

__all__ = [
    # Constants
    "TEST_AMOUNTS",
    "TEST_QUANTITIES",
    # Bid creators
    "create_test_bid",
    "create_bids",
    # Auction creators
    "create_test_auction",
]
