"""Slack item fetcher."""

from pinlog.providers.slack.client import SlackClient

__all__ = ["SlackClient"]
