"""Configuration for the device gateway."""

from device_gateway.config.settings import Config, get_config

__all__ = ["Config", "get_config"]
