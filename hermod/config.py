from __future__ import annotations

import os

from pydantic import BaseModel

DEFAULT_API_BASE = "https://api.openai.com/v1"


class HermodConfig(BaseModel):
    api_key: str | None = None
    api_base: str = DEFAULT_API_BASE
    log_level: str = "warning"
    timeout: float | None = None


def load_config() -> HermodConfig:
    data: dict = {}

    env_overrides: dict[str, tuple[str, type]] = {
        "OPENAI_API_KEY": ("api_key", str),
        "OPENAI_BASE_URL": ("api_base", str),
        "HERMOD_LOG_LEVEL": ("log_level", str),
        "HERMOD_TIMEOUT": ("timeout", float),
    }

    for env_var, (key, cast) in env_overrides.items():
        value = os.environ.get(env_var)
        if value is None:
            continue
        data[key] = cast(value)

    return HermodConfig(**data)
