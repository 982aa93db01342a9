"""Vault Allocator: diversified yield-vault allocation planning."""

__version__ = "0.1.0"
