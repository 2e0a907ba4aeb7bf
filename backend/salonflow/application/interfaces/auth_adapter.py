"""Abstract identity port — turns a bearer token into a principal."""

from abc import ABC, abstractmethod

from salonflow.domain.entities import Principal


class AuthAdapter(ABC):
    """Port for the external authentication collaborator."""

    @abstractmethod
    async def validate_token(self, token: str) -> Principal | None:
        """Return the principal for ``token``, or None when it is not valid."""
        ...
