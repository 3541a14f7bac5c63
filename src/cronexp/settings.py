"""Settings for the cronexp command line and useful functionality to work with them."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from typing_extensions import NotRequired, TypedDict, Unpack

from cronexp.errors import CronexpConfigError

ENV_PREFIX = "CRONEXP"


class CronexpSettingsKwargs(TypedDict):
    """Kwargs accepted by :meth:`CronexpSettings.load`."""

    log_level: NotRequired[str]
    column_width: NotRequired[int]
    echo_input: NotRequired[bool]


@dataclasses.dataclass
class CronexpSettings:
    """Strongly typed configuration holder for the cronexp command line."""

    log_level: str
    column_width: int
    echo_input: bool

    @classmethod
    def from_defaults(cls) -> dict[str, Any]:
        """Return the canonical default values for all settings fields."""
        return {
            "log_level": "WARNING",
            "column_width": 14,
            "echo_input": True,
        }

    @classmethod
    def load(cls, **settings: Unpack[CronexpSettingsKwargs]) -> CronexpSettings:
        """Load settings from keyword overrides, env vars, and defaults (in that order).

        :param settings: Keyword arguments that override both environment variables and defaults.
        :returns: A fully instantiated :class:`CronexpSettings` object.
        """
        final_settings = cls.from_defaults()
        final_settings.update(cls.from_envs())
        final_settings.update(settings)
        return cls(**final_settings)

    def update(self, **settings: Unpack[CronexpSettingsKwargs]) -> None:
        """Apply keyword overrides directly to the instance."""
        for k, v in settings.items():
            if hasattr(self, k):
                setattr(self, k, v)

    def as_dict(self) -> dict[str, Any]:
        """Return specified settings as a plain dictionary for serialisation."""
        return dataclasses.asdict(self)

    @classmethod
    def from_envs(cls) -> dict[str, Any]:
        """Return settings overridden via ``CRONEXP_*`` environment variables."""
        coercers: dict[str, Any] = {
            "log_level": str.upper,
            "column_width": _to_positive_int,
            "echo_input": _to_bool,
        }

        to_return: dict[str, Any] = {}
        for field in dataclasses.fields(cls):
            env_var = f"{ENV_PREFIX}_{field.name.upper()}"
            if env_var not in os.environ:
                continue
            raw_value = os.environ[env_var]
            if field.name not in coercers:
                to_return[field.name] = raw_value
                continue

            try:
                to_return[field.name] = coercers[field.name](raw_value)
            except ValueError as exc:
                msg = f"{raw_value!r} is not a valid value for {field.name!r}"
                raise CronexpConfigError(msg) from exc
        return to_return


def _to_positive_int(value: str) -> int:
    result = int(value)
    if result <= 0:
        msg = f"Must be a positive integer, got {value!r}"
        raise ValueError(msg)
    return result


def _to_bool(value: str) -> bool:
    truthy = {"1", "true", "yes", "on"}
    falsy = {"0", "false", "no", "off"}
    lower = value.lower()
    if lower in truthy:
        return True
    if lower in falsy:
        return False
    msg = f"Must be a boolean (one of {sorted(truthy | falsy)}), got {value!r}"
    raise ValueError(msg)
