"""Item fetcher exports."""

from pinlog.providers.factory import create_fetcher

__all__ = ["create_fetcher"]
