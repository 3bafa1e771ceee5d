"""Item fetcher factory."""

from __future__ import annotations

from pinlog.contracts.config import PinLogConfig
from pinlog.contracts.fetcher import ItemFetcher
from pinlog.providers.slack.client import SlackClient


def create_fetcher(config: PinLogConfig, *, token: str) -> ItemFetcher:
    return SlackClient(token=token, api_url=config.api_url, max_retries=config.max_retries)
