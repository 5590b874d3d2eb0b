from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from .constants import OutcomeKind


@dataclass(frozen=True, slots=True)
class Success:
    """The verify callback accepted the credentials."""
    user: Any
    info: Any = None

    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.SUCCESS


@dataclass(frozen=True, slots=True)
class Fail:
    """
    Caller-side rejection: provider denial, missing token, or the verify
    callback returning no user. `info` is an optional human-readable payload.
    """
    info: Any = None

    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.FAIL

    @property
    def message(self) -> str | None:
        if isinstance(self.info, dict):
            return self.info.get("message")
        if isinstance(self.info, str):
            return self.info
        return None


@dataclass(frozen=True, slots=True)
class Error:
    """Infrastructure/provider failure, or an exception raised by verify."""
    error: BaseException

    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.ERROR


Outcome = Union[Success, Fail, Error]
