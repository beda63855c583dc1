"""
Domain: Capability interfaces for external collaborators.

The presale never manipulates token balances directly. It calls into one
adapter per underlying asset:

- TokenIssuer: mints sale tokens; the presale must hold the minter capability.
- TokenTransferer: moves payment tokens; pulls require a prior approval by
  the buyer, pushes spend from the presale's own custody.

Adapters report every failure by raising CollaboratorError.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TokenIssuer(Protocol):
    def mint(self, to: str, amount: int) -> None:
        ...


@runtime_checkable
class TokenTransferer(Protocol):
    def pull_from(self, owner: str, to: str, amount: int) -> None:
        ...

    def push(self, to: str, amount: int) -> None:
        ...

    def balance_of(self, holder: str) -> int:
        ...
