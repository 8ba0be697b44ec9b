"""
Domain errors

Every failure raised by framebits derives from DomainError so that callers
(CLI, render hosts) can catch one type. Out-of-range frames are never errors.
"""

from typing import Optional


class DomainError(Exception):
    """Base class for domain-specific errors"""
    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict] = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __repr__(self):
        return f"{type(self).__name__}({self.code}: {self.message})"


class InvalidSpecificationError(DomainError, ValueError):
    """Value specification, timing or variant is malformed"""
    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(
            code="INVALID_SPECIFICATION",
            message=message,
            details=details,
        )


class UnknownEasingError(InvalidSpecificationError):
    """Easing name is not registered"""
    def __init__(self, name: str, valid_names: list):
        super().__init__(
            message=f"Unknown easing '{name}'",
            details={
                "easing": name,
                "valid_names": valid_names,
            },
        )
        self.code = "UNKNOWN_EASING"


class PresetNotFoundError(DomainError, KeyError):
    """Preset name doesn't exist"""
    def __init__(self, name: str):
        super().__init__(
            code="PRESET_NOT_FOUND",
            message=f"Preset '{name}' not found",
            details={"preset": name},
        )

    def __str__(self):
        return self.message


class ConfigError(DomainError):
    """Configuration file missing, unreadable or failing schema validation"""
    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(
            code="CONFIG_ERROR",
            message=message,
            details=details,
        )
