"""
Interpreter configuration.

Settings are resolved in this order, later wins:
1. Defaults on InterpreterConfig
2. The [minicalc] table of a TOML file, if a path is given and exists
3. MINICALC_* environment variables

Example minicalc.toml:

    [minicalc]
    strict_tokens = true
    parenthesize = false
    stop_on_error = false
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path

logger = logging.getLogger(__name__)

ENV_PREFIX = "MINICALC_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class InterpreterConfig:
    """
    Interpreter behaviour switches.

    Attributes:
        strict_tokens: Reject unrecognised characters instead of skipping them
        parenthesize: Emit precedence-preserving parentheses when rendering expressions
        stop_on_error: Stop executing a program at the first failing statement
    """

    strict_tokens: bool = False
    parenthesize: bool = False
    stop_on_error: bool = False


def load_config(path: Path | None = None) -> InterpreterConfig:
    """Build an InterpreterConfig from an optional TOML file and the environment.

    Args:
        path: TOML file with a [minicalc] table. Missing files are ignored.

    Returns:
        The resolved configuration.
    """
    config = InterpreterConfig()

    if path is not None and path.exists():
        data = tomllib.loads(path.read_text(encoding="utf-8"))
        table = data.get("minicalc", {})
        known = {f.name for f in fields(InterpreterConfig)}
        settings: dict[str, bool] = {}
        for key, value in table.items():
            if key not in known:
                logger.warning("Ignoring unknown setting '%s' in %s", key, path)
            elif not isinstance(value, bool):
                logger.warning(
                    "Setting '%s' in %s must be true or false, got %r. Keeping %s.",
                    key,
                    path,
                    value,
                    getattr(config, key),
                )
            else:
                settings[key] = value
        config = replace(config, **settings)

    return _apply_env_overrides(config)


def _apply_env_overrides(config: InterpreterConfig) -> InterpreterConfig:
    overrides: dict[str, bool] = {}
    for f in fields(InterpreterConfig):
        var = ENV_PREFIX + f.name.upper()
        if var not in os.environ:
            continue
        raw = os.environ[var].lower().strip()
        if raw in _TRUE_VALUES:
            overrides[f.name] = True
        elif raw in _FALSE_VALUES:
            overrides[f.name] = False
        else:
            logger.warning(
                "Unknown %s value '%s'. Valid values: 1/true/yes/on, 0/false/no/off. "
                "Keeping %s.",
                var,
                raw,
                getattr(config, f.name),
            )
    return replace(config, **overrides)
