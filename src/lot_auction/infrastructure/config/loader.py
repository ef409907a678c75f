"""Configuration loading utilities.

Reads the auction section of a YAML configuration file into typed
configuration objects, applying defaults for anything left out.
"""

from pathlib import Path
from typing import Dict, Optional

import yaml

from ...domain.auction import AuctionStrategy
from .models import AuctionConfig


class ConfigLoader:
    """Loads auction settings from a YAML file.

    The file is parsed on first access and the result cached, so the
    auction section can be read repeatedly without further file I/O.

    Parameters
    ----------
    config_path : Optional[Path]
        Path to the configuration file. Defaults to "config/default.yaml"

    Attributes
    ----------
    config_path : Path
        The path to the configuration file
    _config_data : Optional[Dict]
        Cached configuration data
    """

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize the config loader with a path."""
        self.config_path = config_path or Path("config/default.yaml")
        self._config_data: Optional[Dict] = None

    def load(self) -> Dict:
        """Load raw configuration data from YAML file.

        Loads the YAML file and caches the result. Subsequent calls
        return the cached data.

        Returns
        -------
        Dict
            The parsed YAML configuration as a dictionary

        Raises
        ------
        FileNotFoundError
            If the configuration file doesn't exist
        yaml.YAMLError
            If the YAML file is malformed
        """
        if self._config_data is None:
            if not self.config_path.exists():
                raise FileNotFoundError(
                    f"Configuration file not found: {self.config_path}"
                )

            with open(self.config_path) as f:
                try:
                    self._config_data = yaml.safe_load(f) or {}
                except yaml.YAMLError as e:
                    raise yaml.YAMLError(
                        f"Failed to parse config file {self.config_path}: {e}"
                    )

        return self._config_data

    def get_auction_config(self) -> AuctionConfig:
        """Get auction configuration.

        Extracts the auction section from the configuration and returns
        it as a typed AuctionConfig object. Missing keys, or a missing
        section, fall back to the auction defaults.

        Returns
        -------
        AuctionConfig
            The auction configuration with defaults applied

        Raises
        ------
        ValueError
            If lots or reserve_price is not an integer, or the strategy
            name is unknown

        Notes
        -----
        Only types are checked. Negative lots or reserve prices are passed
        through unchanged, the same as when building an auction directly.

        Examples
        --------
        >>> loader = ConfigLoader()
        >>> auction_config = loader.get_auction_config()
        >>> print(auction_config.strategy)
        single_price
        """
        data = self.load()
        auction_data = data.get("auction") or {}
        defaults = AuctionConfig()

        lots = auction_data.get("lots", defaults.lots)
        if not isinstance(lots, int) or isinstance(lots, bool):
            raise ValueError(f"Invalid lots: {lots}. Must be an integer.")

        reserve_price = auction_data.get(
            "reserve_price", defaults.reserve_price
        )
        if not isinstance(reserve_price, int) or isinstance(
            reserve_price, bool
        ):
            raise ValueError(
                f"Invalid reserve_price: {reserve_price}. "
                "Must be an integer amount in minor currency units."
            )

        strategy = auction_data.get("strategy", defaults.strategy)
        valid_strategies = [s.value for s in AuctionStrategy]
        if strategy not in valid_strategies:
            raise ValueError(
                f"Invalid auction strategy: {strategy}. "
                f"Valid strategies are: {valid_strategies}"
            )

        return AuctionConfig(
            lots=lots,
            reserve_price=reserve_price,
            strategy=strategy,
        )
