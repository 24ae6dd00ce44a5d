"""Config settings – SearchSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar, Mapping

from search_params.config.settings.base import Settings
from search_params.config.settings.loaders import EnvSettingsLoader
from search_params.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class SearchSettings(Settings):
    """Library-wide defaults for building search parameters.

    ``search()``, ``paging()`` and the builders call :meth:`from_env` when
    no settings are passed, so the defaults can be changed with::

        SEARCH_PARAMS_DEFAULT_PAGE_SIZE=25
    """

    _prefix: ClassVar[str] = "SEARCH_PARAMS"

    default_page_size: int = 10

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SearchSettings":
        return EnvSettingsLoader(environ).load(cls)

    def _validate(self) -> None:
        if self.default_page_size < 0:
            raise InvalidSettingValueError(
                "default_page_size", self.default_page_size, "must be >= 0"
            )


__all__ = ["SearchSettings"]
