"""Settings for cronexp and useful functionality to work with them."""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import Any

from cronexp.errors import CronexpConfigError
from cronexp.table import DEFAULT_COLUMN_WIDTH

ENV_PREFIX = "CRONEXP"


@dataclasses.dataclass
class CronexpSettings:
    """Strongly typed configuration holder for the command-line front end."""

    log_level: str
    column_width: int

    @classmethod
    def from_defaults(cls) -> dict[str, Any]:
        """Return the canonical default values for all settings fields."""
        return {
            "log_level": "WARNING",
            "column_width": DEFAULT_COLUMN_WIDTH,
        }

    @classmethod
    def load(cls, **settings: Any) -> CronexpSettings:
        """Load settings from keyword overrides, env vars, and defaults (in that order).

        :param settings: Keyword arguments that override both environment variables and defaults.
            ``None`` values are ignored so optional CLI flags can be passed straight through.
        :returns: A fully instantiated :class:`CronexpSettings` object.
        """
        final_settings = cls.from_defaults()
        final_settings.update(cls.from_envs())
        final_settings.update({k: v for k, v in settings.items() if v is not None})
        return cls(**final_settings)

    def as_dict(self) -> dict[str, Any]:
        """Return specified settings as a plain dictionary."""
        return dataclasses.asdict(self)

    @classmethod
    def from_envs(cls) -> dict[str, Any]:
        """Return settings overridden via ``CRONEXP_*`` environment variables."""
        coercers: dict[str, Any] = {
            "log_level": _to_level_name,
            "column_width": _to_positive_int,
        }

        to_return: dict[str, Any] = {}
        for field in dataclasses.fields(cls):
            env_var = f"{ENV_PREFIX}_{field.name.upper()}"
            if env_var not in os.environ:
                continue
            raw_value = os.environ[env_var]
            try:
                to_return[field.name] = coercers[field.name](raw_value)
            except ValueError as exc:
                msg = f"{raw_value!r} is not a valid value for {field.name!r}"
                raise CronexpConfigError(msg) from exc
        return to_return


def _to_level_name(value: str) -> str:
    upper = value.strip().upper()
    if not isinstance(logging.getLevelName(upper), int):
        msg = f"Must be a logging level name, got {value!r}"
        raise ValueError(msg)
    return upper


def _to_positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        msg = f"Must be a positive integer, got {value!r}"
        raise ValueError(msg)
    return number
