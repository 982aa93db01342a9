"""Protocol-specific configuration and queries."""
