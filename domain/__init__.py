"""Pure presale domain: configuration, counters, pricing, cap and access rules."""
