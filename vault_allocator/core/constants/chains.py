"""Chain IDs used when querying vault data."""

# Base mainnet, where the built-in catalog vaults are deployed
BASE_CHAIN_ID = 8453
