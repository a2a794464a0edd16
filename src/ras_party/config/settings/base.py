"""Config settings – Settings base dataclass."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Dataclass base for service settings.

    Each field maps to the environment variable ``FIELD`` upper-cased, or
    ``PREFIX_FIELD`` when a subclass sets ``_prefix``.  ``_validate`` runs
    after construction and raises ``InvalidSettingValueError``.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        pass


__all__ = ["Settings"]
