"""Kernel errors – BaseError, the root every ras-party error derives from."""
from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """A failure carrying a human message and a stable ``code`` slug.

    The slug is what clients and log queries match on; the message may
    change wording.  Subclasses pick their slug through ``default_code``.
    ``cause`` is kept on the instance and chained as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = self.default_code if code is None else code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Log-friendly view: ``code``, ``message``, ``detail`` and ``cause`` when set."""
        data: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            data["cause"] = repr(self.cause)
        return data


__all__ = ["BaseError"]
