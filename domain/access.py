"""
Domain: Single-owner access control.

Ownership is one tagged value, never a role hierarchy. Exactly one owner is
active at any time; there is no renounce operation.
"""

from __future__ import annotations

from typing import Optional

from .errors import InvalidAddress, Unauthorized
from .events import OwnershipTransferred

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


def require_address(name: str, value: Optional[str]) -> str:
    """Reject empty and zero addresses."""

    if not value or not str(value).strip():
        raise InvalidAddress(f"{name} is required")
    if value == ZERO_ADDRESS:
        raise InvalidAddress(f"{name} cannot be the zero address")
    return value


class AccessGuard:
    def __init__(self, owner: str) -> None:
        self._owner = require_address("owner", owner)

    @property
    def owner(self) -> str:
        return self._owner

    def is_owner(self, caller: Optional[str]) -> bool:
        return caller is not None and caller == self._owner

    def require_owner(self, caller: Optional[str]) -> None:
        """Raise Unauthorized unless caller is the current owner."""

        if not self.is_owner(caller):
            raise Unauthorized()

    def transfer_ownership(self, caller: Optional[str], new_owner: str) -> OwnershipTransferred:
        self.require_owner(caller)
        require_address("new_owner", new_owner)

        previous = self._owner
        self._owner = new_owner
        return OwnershipTransferred(previous_owner=previous, new_owner=new_owner)
