"""
Presale factory.

Deploys a presale against the in-memory sale and payment tokens:
1. create the sale token (admin = owner) and the payment token
2. create the presale with one adapter per token
3. grant the presale the sale token's minter role

Used by the HTTP API, the simulation script and the tests.
"""

from __future__ import annotations

from dataclasses import dataclass

from domain.presale import Presale
from domain.sale_config import SaleConfig
from repositories.token_ledgers import (
    MintableToken,
    PaymentTokenTransferer,
    SaleTokenIssuer,
    StablecoinToken,
)


@dataclass(frozen=True, slots=True)
class PresaleDeployment:
    presale: Presale
    sale_token: MintableToken
    payment_token: StablecoinToken


def deploy_in_memory_presale(
    *,
    owner: str,
    presale_address: str,
    price_per_token: int,
    cap: int,
    sale_token_address: str = "sale-token",
    payment_token_address: str = "payment-token",
    sale_token_decimals: int = 18,
    payment_token_decimals: int = 6,
    grant_minter: bool = True,
) -> PresaleDeployment:
    """
    Example:
        deployment = deploy_in_memory_presale(
            owner="0xowner", presale_address="0xpresale",
            price_per_token=500_000, cap=1000 * 10**18,
        )
        deployment.payment_token.mint("0xbuyer", 100 * 10**6)
    """

    config = SaleConfig(
        sale_token=sale_token_address,
        payment_token=payment_token_address,
        price_per_token=price_per_token,
        cap=cap,
        sale_token_decimals=sale_token_decimals,
        payment_token_decimals=payment_token_decimals,
    )
    sale_token = MintableToken(admin=owner, decimals=sale_token_decimals)
    payment_token = StablecoinToken(decimals=payment_token_decimals)

    presale = Presale(
        config=config,
        owner=owner,
        issuer=SaleTokenIssuer(sale_token, minter=presale_address),
        transferer=PaymentTokenTransferer(payment_token, spender=presale_address),
        address=presale_address,
    )

    if grant_minter:
        sale_token.grant_minter_role(presale_address, caller=owner)

    return PresaleDeployment(presale=presale, sale_token=sale_token, payment_token=payment_token)


__all__ = ["PresaleDeployment", "deploy_in_memory_presale"]
