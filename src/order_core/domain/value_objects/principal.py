from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Principal:
    """The authenticated caller, as supplied by the auth boundary.

    The core never validates tokens; a Principal is trusted as given.
    """

    identity: str
    is_admin: bool = False
