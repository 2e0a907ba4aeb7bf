"""Domain entity — the authenticated actor a request executes on behalf of."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Principal:
    """Opaque identity handed over by the authentication collaborator.

    Only ``id`` is ever used for scoping; ``email`` is informational.
    """

    id: str
    email: str = ""
