"""Concrete token resolvers."""

from pinlog.auth.resolvers.env import EnvTokenResolver
from pinlog.auth.resolvers.static import StaticTokenResolver

__all__ = ["EnvTokenResolver", "StaticTokenResolver"]
