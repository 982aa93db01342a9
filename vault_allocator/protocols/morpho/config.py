"""Morpho Blue protocol-specific configuration and constants."""

# GraphQL API rate limits
MORPHO_API_RATE_LIMIT = 5000  # requests per 5 minutes
MORPHO_API_RATE_WINDOW = 300  # seconds

# Default API URL
MORPHO_API_URL = "https://blue-api.morpho.org/graphql"

# Vaults returned per page by the API
MORPHO_VAULTS_PAGE_LIMIT = 1000

# Display name attached to vaults parsed from the API
MORPHO_PROTOCOL_NAME = "Morpho"
