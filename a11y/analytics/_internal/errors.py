from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ErrorInfo:
    type: str
    message: str
    capability: str | None = None


class A11yAnalyticsError(RuntimeError):
    def __init__(self, info: ErrorInfo):
        super().__init__(info.message)
        self.info = info


def invalid_request_error(message: str, capability: str | None = None) -> A11yAnalyticsError:
    return A11yAnalyticsError(
        ErrorInfo(type="InvalidRequestError", message=message, capability=capability)
    )


def invalid_value_error(message: str, capability: str | None = None) -> A11yAnalyticsError:
    return A11yAnalyticsError(
        ErrorInfo(type="InvalidValueError", message=message, capability=capability)
    )


def provider_unavailable_error(message: str, capability: str | None = None) -> A11yAnalyticsError:
    return A11yAnalyticsError(
        ErrorInfo(type="ProviderUnavailableError", message=message, capability=capability)
    )
