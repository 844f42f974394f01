# unserialize_tool/infrastructure/config/_loader.py

"""Access to the decoder, binder and logging configuration sections"""

# Standard library imports
from logging import getLogger
from pathlib import Path

# Local imports
from unserialize_tool.infrastructure.config._models import AppConfig
from unserialize_tool.infrastructure.config._models import BinderConfig
from unserialize_tool.infrastructure.config._models import DecoderConfig
from unserialize_tool.infrastructure.config._models import LoggingConfig

logger = getLogger(__name__)


class ConfigLoader:
    """Loads an AppConfig and exposes its sections"""

    def __init__(self, config_path: str | Path | None = None):
        """Load configuration from ``config_path``

        Args:
            config_path: JSON file to read, None to look for the default file
        """
        self.config_path = config_path
        self._app_config = AppConfig.load(config_path)
        logger.debug(f"Decoder limits: {self._app_config.decoder.model_dump()}")

    @classmethod
    def from_config(cls, app_config: AppConfig) -> "ConfigLoader":
        """Wrap an already built configuration"""
        loader = cls.__new__(cls)
        loader.config_path = None
        loader._app_config = app_config
        return loader

    @property
    def app_config(self) -> AppConfig:
        return self._app_config

    @property
    def config(self) -> dict[str, object]:
        """All sections as plain dicts"""
        return self._app_config.model_dump()

    @property
    def decoder(self) -> DecoderConfig:
        return self._app_config.decoder

    @property
    def binder(self) -> BinderConfig:
        return self._app_config.binder

    @property
    def logging(self) -> LoggingConfig:
        return self._app_config.logging


# Shared loader for callers that pass no path
_default_config: ConfigLoader | None = None


def get_config(config_path: str | Path | None = None) -> ConfigLoader:
    """Return a loader for ``config_path``, or the shared default loader

    An explicit path is loaded fresh on every call. Without one, the default
    configuration is loaded once and reused.
    """
    global _default_config

    if config_path is not None:
        return ConfigLoader(config_path)

    if _default_config is None:
        _default_config = ConfigLoader()

    return _default_config
