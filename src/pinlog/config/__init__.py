"""Configuration loading exports."""

from pinlog.config.loader import load_config

__all__ = ["load_config"]
