"""Config validation errors."""
from levellog.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Logger configuration could not be loaded."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting was supplied but cannot be used as given.

    ``setting_name`` is the field name (``log_level``) or, when the value
    came from the environment, the variable name (``LEVELLOG_ADD_TIMESTAMP``).
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": repr(value)},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
