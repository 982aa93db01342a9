"""Data layer: vault sources, caching and the pipeline."""

from vault_allocator.data.pipeline import VaultPipeline, build_default_source

__all__ = ["VaultPipeline", "build_default_source"]
