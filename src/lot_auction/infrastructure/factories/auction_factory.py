"""Factory for creating configured auction instances.

This module provides factory methods to create Auction instances
from configuration objects or configuration files.
"""

import logging

from ...domain.auction import Auction, AuctionBuilder, AuctionStrategy
from ..config.loader import ConfigLoader
from ..config.models import AuctionConfig

logger = logging.getLogger(__name__)


class AuctionFactory:
    """Factory for creating configured auction instances.

    This class provides static methods to create Auction instances
    based on configuration, hiding the conversion from configuration
    values to domain types.
    """

    @staticmethod
    def create_from_config(config: AuctionConfig) -> Auction:
        """Create an auction from an auction configuration.

        Parameters
        ----------
        config : AuctionConfig
            Configuration specifying lots, reserve price and strategy

        Returns
        -------
        Auction
            Auction ready to resolve bids

        Raises
        ------
        ValueError
            If the strategy name is not a known AuctionStrategy
        """
        auction = (
            AuctionBuilder()
            .lots(config.lots)
            .reserve_price(config.reserve_price)
            .strategy(AuctionStrategy(config.strategy))
            .build()
        )

        logger.info(
            f"Created {auction.strategy.value} auction: "
            f"lots={auction.lots}, reserve_price={auction.reserve_price}"
        )
        return auction

    @staticmethod
    def create_from_loader(config_loader: ConfigLoader) -> Auction:
        """Create an auction from the auction section of a config file.

        Parameters
        ----------
        config_loader : ConfigLoader
            Configuration loader instance with access to config data

        Returns
        -------
        Auction
            Auction ready to resolve bids

        Examples
        --------
        >>> config_loader = ConfigLoader(Path("config/default.yaml"))
        >>> auction = AuctionFactory.create_from_loader(config_loader)
        >>> auction.strategy
        <AuctionStrategy.SINGLE_PRICE: 'single_price'>
        """
        return AuctionFactory.create_from_config(
            config_loader.get_auction_config()
        )
