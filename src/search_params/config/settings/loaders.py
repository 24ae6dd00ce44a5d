"""Config settings – EnvSettingsLoader."""
from __future__ import annotations

import dataclasses
import os
from typing import Any, Mapping, TypeVar

from search_params.config.settings.base import Settings
from search_params.config.validation import ConfigError, InvalidSettingValueError

T = TypeVar("T", bound=Settings)


class EnvSettingsLoader:
    """Fill a :class:`Settings` dataclass from ``<PREFIX>_<FIELD>`` variables.

    *environ* defaults to :data:`os.environ`; pass a plain mapping to load
    from somewhere else.  Fields without a matching variable keep their
    dataclass default.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = settings_class._prefix.upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper()
            raw = environ.get(env_key)
            if raw is None:
                continue
            try:
                kwargs[field.name] = self._coerce(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, "not an integer", cause=exc) from exc

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}", cause=exc) from exc

    @staticmethod
    def _coerce(value: str, type_hint: Any) -> Any:
        if type_hint is int or type_hint == "int":
            return int(value.strip())
        return value


__all__ = ["EnvSettingsLoader"]
