from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID, uuid4

from order_core.domain.exceptions import InvalidOrderIdError


@dataclass(frozen=True, slots=True)
class OrderId:
    """Value object for order identifiers (UUID v4)."""

    value: UUID

    @classmethod
    def generate(cls) -> OrderId:
        """Generate a new unique OrderId."""
        return cls(value=uuid4())

    @classmethod
    def from_string(cls, id_str: str) -> OrderId:
        """Parse an OrderId from a string representation.

        Args:
            id_str: UUID string (with or without hyphens, any case).

        Returns:
            An OrderId instance.

        Raises:
            InvalidOrderIdError: If the string is not a valid UUID.
        """
        try:
            return cls(value=UUID(id_str))
        except (ValueError, AttributeError, TypeError) as e:
            raise InvalidOrderIdError(f"Invalid order ID: {id_str}") from e

    def __str__(self) -> str:
        return str(self.value)
