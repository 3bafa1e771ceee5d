"""Token resolver factory."""

from __future__ import annotations

from pinlog.auth.base import TokenResolver
from pinlog.auth.resolvers.env import EnvTokenResolver
from pinlog.auth.resolvers.static import StaticTokenResolver
from pinlog.contracts.config import PinLogConfig
from pinlog.contracts.exceptions import ConfigError

RESOLVERS: dict[str, type[TokenResolver]] = {
    "env": EnvTokenResolver,
    "token": StaticTokenResolver,
}


def create_token_resolver(config: PinLogConfig) -> TokenResolver:
    """Resolver for the messaging API token."""
    auth_mode = config.auth
    if auth_mode not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {auth_mode}")

    if auth_mode == "env":
        return EnvTokenResolver(env_var=config.token_env)
    return StaticTokenResolver(token=config.token or "")


def create_store_token_resolver(config: PinLogConfig) -> TokenResolver:
    """Resolver for the spreadsheet API token; always read from the environment."""
    return EnvTokenResolver(env_var=config.sheets_token_env)
