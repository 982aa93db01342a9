"""Page slicing for vault listings."""

from typing import Sequence

from vault_allocator.core.models import Vault, VaultPage


def paginate(vaults: Sequence[Vault], page: int, page_size: int) -> VaultPage:
    """
    Return one page of ``vaults``.

    Pages are 1-indexed. A page below 1, past the last vault, or a
    non-positive page size yields an empty page with ``has_more`` False.
    """
    if page < 1 or page_size < 1:
        return VaultPage(vaults=[], page=page, page_size=page_size, has_more=False)

    start_index = (page - 1) * page_size
    end_index = page * page_size

    if start_index >= len(vaults):
        return VaultPage(vaults=[], page=page, page_size=page_size, has_more=False)

    return VaultPage(
        vaults=list(vaults[start_index:end_index]),
        page=page,
        page_size=page_size,
        has_more=end_index < len(vaults),
    )
