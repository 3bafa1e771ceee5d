"""Auth exports."""

from pinlog.auth.base import TokenResolver
from pinlog.auth.factory import create_store_token_resolver, create_token_resolver

__all__ = ["TokenResolver", "create_store_token_resolver", "create_token_resolver"]
