"""Identity infrastructure: persistence adapters."""
