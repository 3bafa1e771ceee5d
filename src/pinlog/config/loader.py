"""Config loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pinlog.contracts.config import PinLogConfig
from pinlog.contracts.exceptions import ConfigError


def _resolve_path(value: str, *, base_dir: Path) -> str:
    path = Path(value).expanduser()
    if path.is_absolute():
        return str(path)
    return str((base_dir / path).resolve())


def load_config(path: str | Path) -> PinLogConfig:
    """Load and validate config from JSON, resolving a CSV store path against the config directory."""
    config_path = Path(path).expanduser().resolve()
    config_dir = config_path.parent

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        parsed = PinLogConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    if parsed.store != "csv":
        return parsed
    return parsed.model_copy(update={"store_id": _resolve_path(parsed.store_id, base_dir=config_dir)})
