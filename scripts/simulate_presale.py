"""
Simulate a presale against in-memory tokens.

Replays the reference flow:
1. Deploy sale token, payment token and presale; grant the minter role
2. Fund the buyer with payment tokens
3. Buyer approves and buys
4. Non-owner withdrawal is rejected; owner withdraws everything
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from domain.errors import PresaleError
from domain.pricing import to_display
from services.presale_factory import deploy_in_memory_presale
from services.purchase_service import buy
from services.status_service import get_sale_status
from services.treasury_service import withdraw_funds

OWNER = "0x1000000000000000000000000000000000000001"
PRESALE = "0x2000000000000000000000000000000000000002"
BUYER = "0x5000000000000000000000000000000000000005"


def run_simulation(price: int, cap_tokens: int, funding: int, payments: list[int]) -> int:
    deployment = deploy_in_memory_presale(
        owner=OWNER,
        presale_address=PRESALE,
        price_per_token=price,
        cap=cap_tokens * 10**18,
    )
    presale = deployment.presale
    usdc = deployment.payment_token
    decimals = presale.config.payment_token_decimals

    usdc.mint(BUYER, funding)
    print(f"Funded buyer with {to_display(funding, decimals)} USDC")
    print()

    failures = 0
    for payment in payments:
        usdc.approve(BUYER, PRESALE, payment)
        try:
            result = buy(presale, BUYER, payment)
            print(
                f"[OK]   paid {to_display(payment, decimals)} USDC -> "
                f"{to_display(result.token_quantity, presale.config.sale_token_decimals)} tokens"
            )
        except PresaleError as e:
            failures += 1
            print(f"[FAIL] paid {to_display(payment, decimals)} USDC -> {e.code}: {e.message}")

    print()
    try:
        withdraw_funds(presale, BUYER, BUYER)
    except PresaleError as e:
        print(f"Buyer withdrawal rejected as expected: {e.message}")

    if presale.state.funds_available > 0:
        result = withdraw_funds(presale, OWNER, OWNER)
        print(f"Owner withdrew {to_display(result.amount, decimals)} USDC")

    status = get_sale_status(presale)
    print()
    print("=" * 50)
    print("PRESALE SUMMARY")
    print("=" * 50)
    print(f"Tokens issued:        {to_display(status.tokens_issued, presale.config.sale_token_decimals)}")
    print(f"Tokens remaining:     {to_display(status.tokens_remaining, presale.config.sale_token_decimals)}")
    print(f"Funds collected:      {to_display(status.funds_collected, decimals)}")
    print(f"Funds withdrawn:      {to_display(status.funds_withdrawn, decimals)}")
    print(f"Buyer token balance:  {to_display(deployment.sale_token.balance_of(BUYER), 18)}")
    print(f"Owner USDC balance:   {to_display(usdc.balance_of(OWNER), decimals)}")
    print(f"Events emitted:       {len(presale.events)}")
    print("=" * 50)

    return failures


def main() -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Simulate a fixed-price token presale with in-memory tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Reference scenario: 0.50 USDC per token, 1000-token cap, buy 10 USDC
  python scripts/simulate_presale.py

  # Fill the cap exactly, then try one more unit
  python scripts/simulate_presale.py --funding 600000000 --payment 500000000 --payment 1
        """
    )

    parser.add_argument("--price", type=int, default=500_000,
                        help="Payment smallest units per whole token (default: 500000)")
    parser.add_argument("--cap", type=int, default=1000,
                        help="Cap in whole sale tokens (default: 1000)")
    parser.add_argument("--funding", type=int, default=100 * 10**6,
                        help="Payment smallest units minted to the buyer (default: 100 USDC)")
    parser.add_argument("--payment", type=int, action="append",
                        help="Payment smallest units per purchase; repeatable (default: 10 USDC)")
    parser.add_argument("--verbose", action="store_true", help="Show service logs")

    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    try:
        failures = run_simulation(args.price, args.cap, args.funding, args.payment or [10 * 10**6])
        return 0 if failures == 0 else 2

    except KeyboardInterrupt:
        print("\n\nSimulation interrupted by user")
        return 130

    except Exception as e:
        print(f"\nFATAL ERROR: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
