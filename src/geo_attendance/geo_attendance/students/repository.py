from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import StudentIdentity


class IdentityLookup(Protocol):
    """Read side used by the attendance gate."""

    def exists(self, prn: str) -> Optional[StudentIdentity]:
        raise NotImplementedError


class StudentRepository(IdentityLookup, Protocol):
    """Registry interface.

    Note (DIP): services depend on this interface, never on a concrete DB.
    """

    def create(self, *, prn: str, display_name: str) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[StudentIdentity]:
        raise NotImplementedError
