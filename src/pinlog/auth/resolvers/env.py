"""Environment token resolver."""

from __future__ import annotations

import os
from dataclasses import dataclass

from pinlog.auth.base import TokenResolver
from pinlog.contracts.exceptions import AuthenticationError


@dataclass(frozen=True)
class EnvTokenResolver(TokenResolver):
    env_var: str = "SLACK_API_TOKEN"

    async def resolve(self) -> str:
        token = (os.getenv(self.env_var) or "").strip()
        if not token:
            raise AuthenticationError(f"{self.env_var} is not set or empty")
        return token
