"""
Check persisted presale status - counters and recent events from Supabase.
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from repositories.presale_repository import list_events, load_sale_state


def check_presale_status(presale_id: str, limit: int) -> int:
    state = load_sale_state(presale_id)
    if state is None:
        print(f"No persisted state for presale '{presale_id}'")
        return 1

    print("=" * 50)
    print(f"PRESALE STATUS: {presale_id}")
    print("=" * 50)
    print(f"Tokens issued:      {state.tokens_issued}")
    print(f"Funds collected:    {state.funds_collected}")
    print(f"Funds withdrawn:    {state.funds_withdrawn}")
    print(f"Funds available:    {state.funds_available}")
    print("=" * 50)

    print(f"\nMost recent {limit} events:")
    print("-" * 50)
    for event in list_events(presale_id, limit=limit):
        print(f"{event.occurred_at.isoformat()}  {event.event_name:<22} {dict(event.payload)}")
    print("-" * 50)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Show persisted presale counters and events")
    parser.add_argument("--presale-id", default="presale-main")
    parser.add_argument("--limit", type=int, default=20)
    args = parser.parse_args()
    sys.exit(check_presale_status(args.presale_id, args.limit))
