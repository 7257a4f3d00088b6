# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model for a single action run."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, ValidationError

# GitHub exposes action inputs as INPUT_<NAME>, upper-cased with hyphens kept.
INPUT_ENV_VARS: Final[tuple[str, ...]] = ("INPUT_PYLINT-ARGS", "INPUT_PYLINT_ARGS", "PYLINT_ARGS")


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class ActionConfig(BaseModel):
    """Inputs controlling one pylint run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    pylint_args: str = ""
    use_color: bool = True
    use_emoji: bool = True


def _args_from_env(env: Mapping[str, str]) -> str | None:
    """Return the first argument string found under :data:`INPUT_ENV_VARS`."""

    for name in INPUT_ENV_VARS:
        if name in env:
            return env[name]
    return None


def load_config(env: Mapping[str, str] | None = None, **overrides: Any) -> ActionConfig:
    """Build an :class:`ActionConfig` from the environment and explicit overrides.

    Args:
        env: Environment mapping consulted for the argument string; defaults to
            :data:`os.environ`.
        **overrides: Field values that win over the environment. ``None``
            values are ignored.

    Returns:
        ActionConfig: Validated configuration.

    Raises:
        ConfigError: If a value fails validation.
    """

    environment = os.environ if env is None else env
    payload: dict[str, Any] = {}
    env_args = _args_from_env(environment)
    if env_args is not None:
        payload["pylint_args"] = env_args
    payload.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return ActionConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


__all__ = ["ActionConfig", "ConfigError", "INPUT_ENV_VARS", "load_config"]
