"""Root of the eventgate error hierarchy.

Refused transitions carry their error inside an immutable result object,
so ``detail`` is exposed read-only and every error serialises to a plain
dict for audit entries.
"""

from __future__ import annotations

import json
from types import MappingProxyType
from typing import Any, Mapping


class BaseError(Exception):
    """Error with a machine-readable ``code`` and structured ``detail``.

    Args:
        message: Human-readable description.
        code: Slug overriding the class-level ``default_code``.
        detail: Extra context; copied and frozen on construction.
        cause: Underlying exception, chained as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: Mapping[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self._detail = MappingProxyType(dict(detail or {}))
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def detail(self) -> Mapping[str, Any]:
        return self._detail

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form used by audit entries and API adapters."""
        payload: dict[str, Any] = {
            "type": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "detail": dict(self._detail),
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class ApplicationError(BaseError):
    """Wiring or configuration failure outside the domain rules."""

    default_code = "application_error"


__all__ = ["ApplicationError", "BaseError"]
