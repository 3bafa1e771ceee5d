from __future__ import annotations

import pytest

from pinlog.auth.resolvers.env import EnvTokenResolver
from pinlog.auth.resolvers.static import StaticTokenResolver
from pinlog.contracts.exceptions import AuthenticationError


@pytest.mark.asyncio
async def test_env_resolver_reads_and_strips(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLACK_API_TOKEN", "  xoxb-env  ")

    assert await EnvTokenResolver().resolve() == "xoxb-env"


@pytest.mark.asyncio
async def test_env_resolver_uses_configured_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MY_TOKEN", "xoxb-custom")

    assert await EnvTokenResolver(env_var="MY_TOKEN").resolve() == "xoxb-custom"


@pytest.mark.asyncio
@pytest.mark.parametrize("value", [None, "", "   "])
async def test_env_resolver_missing_value(monkeypatch: pytest.MonkeyPatch, value: str | None) -> None:
    if value is None:
        monkeypatch.delenv("SLACK_API_TOKEN", raising=False)
    else:
        monkeypatch.setenv("SLACK_API_TOKEN", value)

    with pytest.raises(AuthenticationError, match="SLACK_API_TOKEN is not set"):
        await EnvTokenResolver().resolve()


@pytest.mark.asyncio
async def test_static_resolver_returns_token() -> None:
    assert await StaticTokenResolver(token=" xoxb-static ").resolve() == "xoxb-static"


@pytest.mark.asyncio
async def test_static_resolver_rejects_blank_token() -> None:
    with pytest.raises(AuthenticationError, match="Static token is empty"):
        await StaticTokenResolver(token=" ").resolve()
