"""Config validation errors."""
from __future__ import annotations

from search_params.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Search settings could not be loaded."""

    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting holds a value the builders cannot use.

    ``setting_name`` is the environment key when the value was read from the
    environment (``SEARCH_PARAMS_DEFAULT_PAGE_SIZE``), otherwise the field
    name (``default_page_size``).
    """

    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": value, "reason": reason},
            cause=cause,
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
