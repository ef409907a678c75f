"""Configuration data models.

This module defines the data structures for application configuration,
using dataclasses for type safety and clarity.
"""

from dataclasses import dataclass


@dataclass
class AuctionConfig:
    """Auction configuration.

    This represents auction settings as loaded from YAML before
    conversion to a domain Auction.

    Attributes
    ----------
    lots : int
        Total units for sale. Default: 1.
    reserve_price : int
        Minimum acceptable per-unit amount in minor currency units.
        Default: 0.
    strategy : str
        Name of the pricing strategy, "single_price" or "multi_price".
        Default: "single_price".
    """

    lots: int = 1
    reserve_price: int = 0
    strategy: str = "single_price"
