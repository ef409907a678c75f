"""Factories for building configured domain objects."""

from .auction_factory import AuctionFactory

__all__ = ["AuctionFactory"]
