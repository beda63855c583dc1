"""
Pytest configuration and shared fixtures.

Adds the project root to the Python path so tests can import domain,
services, repositories and api, and deploys the reference presale:
0.50 USDC (6 decimals) per token, 1000-token cap (18 decimals), buyer funded
with 100 USDC.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from services.presale_factory import deploy_in_memory_presale  # noqa: E402

OWNER = "0x1000000000000000000000000000000000000001"
PRESALE_ADDRESS = "0x2000000000000000000000000000000000000002"
BUYER = "0x5000000000000000000000000000000000000005"

USDC = 10**6
TOKEN = 10**18


@pytest.fixture
def owner() -> str:
    return OWNER


@pytest.fixture
def buyer() -> str:
    return BUYER


@pytest.fixture
def presale_address() -> str:
    return PRESALE_ADDRESS


@pytest.fixture
def deployment():
    deployment = deploy_in_memory_presale(
        owner=OWNER,
        presale_address=PRESALE_ADDRESS,
        price_per_token=500_000,
        cap=1000 * TOKEN,
    )
    deployment.payment_token.mint(BUYER, 100 * USDC)
    return deployment


@pytest.fixture
def presale(deployment):
    return deployment.presale


@pytest.fixture
def usdc(deployment):
    return deployment.payment_token


@pytest.fixture
def sale_token(deployment):
    return deployment.sale_token
