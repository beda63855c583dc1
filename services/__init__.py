"""Presale operations: purchases, withdrawals, quotes and status."""
