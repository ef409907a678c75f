"""Configuration management for lot-auction."""

from .loader import ConfigLoader
from .models import AuctionConfig

__all__ = ["ConfigLoader", "AuctionConfig"]
