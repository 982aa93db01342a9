"""Terminal UI for Vault Allocator."""
