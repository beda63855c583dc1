"""
In-memory token ledgers and their presale adapters.

Two assets back a presale:
- MintableToken: the sale token. Supply grows only through `mint`, which is
  restricted to accounts holding the minter role. The token admin grants and
  revokes that role.
- StablecoinToken: the payment token. Holders approve spenders; spenders pull
  with `transfer_from` up to the approved allowance.

The presale talks to neither directly. It goes through one adapter per
asset, implementing the domain capability protocols:
- SaleTokenIssuer      -> domain.collaborators.TokenIssuer
- PaymentTokenTransferer -> domain.collaborators.TokenTransferer

All failures raise TokenLedgerError (a CollaboratorError) and leave balances
untouched.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Set, Tuple

from domain.errors import CollaboratorError


class TokenLedgerError(CollaboratorError):
    """Base error for in-memory token ledgers."""


class InsufficientBalance(TokenLedgerError):
    pass


class InsufficientAllowance(TokenLedgerError):
    pass


class MissingMinterRole(TokenLedgerError):
    pass


def _require_non_negative(amount: int) -> None:
    if not isinstance(amount, int) or isinstance(amount, bool) or amount < 0:
        raise TokenLedgerError(f"Invalid token amount: {amount!r}")


class _Balances:
    """Balance book shared by both token kinds."""

    def __init__(self, symbol: str, decimals: int) -> None:
        self.symbol = symbol
        self.decimals = decimals
        self.total_supply = 0
        self._balances: Dict[str, int] = defaultdict(int)

    def balance_of(self, holder: str) -> int:
        return self._balances.get(holder, 0)

    def _credit(self, to: str, amount: int) -> None:
        self._balances[to] += amount

    def _move(self, sender: str, to: str, amount: int) -> None:
        _require_non_negative(amount)
        if self.balance_of(sender) < amount:
            raise InsufficientBalance(
                f"{self.symbol}: transfer amount exceeds balance "
                f"(holder={sender}, balance={self.balance_of(sender)}, amount={amount})"
            )
        self._balances[sender] -= amount
        self._balances[to] += amount


class MintableToken(_Balances):
    """Sale token with an admin-managed minter role."""

    def __init__(self, admin: str, symbol: str = "MTK", decimals: int = 18) -> None:
        super().__init__(symbol, decimals)
        self.admin = admin
        self._minters: Set[str] = set()

    def has_minter_role(self, account: str) -> bool:
        return account in self._minters

    def grant_minter_role(self, account: str, caller: str) -> None:
        self._require_admin(caller)
        self._minters.add(account)

    def revoke_minter_role(self, account: str, caller: str) -> None:
        self._require_admin(caller)
        self._minters.discard(account)

    def mint(self, minter: str, to: str, amount: int) -> None:
        _require_non_negative(amount)
        if not self.has_minter_role(minter):
            raise MissingMinterRole(f"{self.symbol}: {minter} is missing the minter role")
        self._credit(to, amount)
        self.total_supply += amount

    def transfer(self, sender: str, to: str, amount: int) -> None:
        self._move(sender, to, amount)

    def _require_admin(self, caller: str | None) -> None:
        if not caller or caller != self.admin:
            raise TokenLedgerError(f"{self.symbol}: {caller} is not the token admin")


class StablecoinToken(_Balances):
    """Payment token with ERC-20 style approvals."""

    def __init__(self, symbol: str = "USDC", decimals: int = 6) -> None:
        super().__init__(symbol, decimals)
        self._allowances: Dict[Tuple[str, str], int] = {}

    def mint(self, to: str, amount: int) -> None:
        """Fund an account (test and demo setup)."""
        _require_non_negative(amount)
        self._credit(to, amount)
        self.total_supply += amount

    def approve(self, owner: str, spender: str, amount: int) -> None:
        _require_non_negative(amount)
        self._allowances[(owner, spender)] = amount

    def allowance(self, owner: str, spender: str) -> int:
        return self._allowances.get((owner, spender), 0)

    def transfer(self, sender: str, to: str, amount: int) -> None:
        self._move(sender, to, amount)

    def transfer_from(self, spender: str, owner: str, to: str, amount: int) -> None:
        _require_non_negative(amount)
        allowed = self.allowance(owner, spender)
        if allowed < amount:
            raise InsufficientAllowance(
                f"{self.symbol}: insufficient allowance "
                f"(owner={owner}, spender={spender}, allowance={allowed}, amount={amount})"
            )
        self._move(owner, to, amount)
        self._allowances[(owner, spender)] = allowed - amount


class SaleTokenIssuer:
    """TokenIssuer adapter: mints the sale token as `minter`."""

    def __init__(self, token: MintableToken, minter: str) -> None:
        self.token = token
        self.minter = minter

    def mint(self, to: str, amount: int) -> None:
        self.token.mint(self.minter, to, amount)


class PaymentTokenTransferer:
    """TokenTransferer adapter: moves the payment token on behalf of `spender`."""

    def __init__(self, token: StablecoinToken, spender: str) -> None:
        self.token = token
        self.spender = spender

    def pull_from(self, owner: str, to: str, amount: int) -> None:
        self.token.transfer_from(self.spender, owner, to, amount)

    def push(self, to: str, amount: int) -> None:
        self.token.transfer(self.spender, to, amount)

    def balance_of(self, holder: str) -> int:
        return self.token.balance_of(holder)


__all__ = [
    "TokenLedgerError",
    "InsufficientBalance",
    "InsufficientAllowance",
    "MissingMinterRole",
    "MintableToken",
    "StablecoinToken",
    "SaleTokenIssuer",
    "PaymentTokenTransferer",
]
