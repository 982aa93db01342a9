"""GraphQL queries for the Morpho Blue API."""


class MorphoQueries:
    """Collection of GraphQL queries for the Morpho API."""

    # ========== VAULT QUERIES ==========

    # One page of vaults on a chain, with risk and metadata used for planning
    VAULTS_QUERY = """
    query ListChainVaults($first: Int!, $skip: Int!, $chainId: Int!) {
        vaults(first: $first, skip: $skip, where: { chainId_in: [$chainId] }) {
            items {
                address
                name
                symbol
                asset {
                    address
                    symbol
                    name
                    decimals
                }
                state {
                    totalAssetsUsd
                    apy
                    netApy
                }
                riskAnalysis {
                    provider
                    score
                }
                warnings {
                    type
                    level
                }
                metadata {
                    description
                    curators {
                        name
                    }
                }
            }
            pageInfo {
                countTotal
                count
                limit
                skip
            }
        }
    }
    """

    # Same page restricted to vaults of one underlying asset
    ASSET_VAULTS_QUERY = """
    query ListChainAssetVaults($first: Int!, $skip: Int!, $chainId: Int!, $assetAddress: String!) {
        vaults(
            first: $first
            skip: $skip
            where: { chainId_in: [$chainId], assetAddress_in: [$assetAddress] }
        ) {
            items {
                address
                name
                symbol
                asset {
                    address
                    symbol
                    name
                    decimals
                }
                state {
                    totalAssetsUsd
                    apy
                    netApy
                }
                riskAnalysis {
                    provider
                    score
                }
                warnings {
                    type
                    level
                }
                metadata {
                    description
                    curators {
                        name
                    }
                }
            }
            pageInfo {
                countTotal
                count
                limit
                skip
            }
        }
    }
    """
