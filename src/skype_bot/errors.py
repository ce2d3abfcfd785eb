"""
Skype bot SDK error types.
"""

from typing import Any, Optional


class SkypeBotError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details


class ModelConstructionError(SkypeBotError):
    """Input could not be turned into a model (null, wrong shape, missing tag)."""

    def __init__(self, message: str, code: str = "construction_error", details: Optional[dict[str, Any]] = None):
        super().__init__(code, message, details)


class UnsupportedTypeError(ModelConstructionError):
    """Discriminant value that no model variant is registered for."""

    def __init__(self, family: str, value: Any):
        super().__init__(
            f"Unsupported {value} {family} type in the {family} data",
            code="unsupported_type",
            details={"family": family, "value": value},
        )
        self.family = family
        self.value = value


class ModelValidationError(SkypeBotError):
    def __init__(self, message: str, errors: list[str]):
        super().__init__("validation_error", f"{message}: {'; '.join(errors)}", {"errors": errors})
        self.errors = errors


class WebhookError(SkypeBotError):
    """Carried by error-typed webhook events."""

    def __init__(self, message: str, activity: Optional[str] = None, payload: Any = None):
        super().__init__("webhook_error", message, {"activity": activity} if activity else None)
        self.activity = activity
        self.payload = payload


class CallingError(SkypeBotError):
    def __init__(self, message: str, code: str = "calling_error", errors: Optional[list[str]] = None):
        super().__init__(code, message, {"errors": errors} if errors else None)
        self.errors = errors or []


class AuthError(SkypeBotError):
    def __init__(self, message: str, code: str = "auth_error"):
        super().__init__(code, message)


class TransportError(SkypeBotError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__("transport_error", message, {"status_code": status_code} if status_code else None)
        self.status_code = status_code


class ConfigError(SkypeBotError):
    def __init__(self, message: str):
        super().__init__("config_error", message)
