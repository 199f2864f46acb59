"""Core business logic layer.

Subpackages:
- matching: ingredient normalization, similarity, recipe matching and ranking
- pantry: expiry helpers and proposed inventory updates
- shopping: consolidating shopping lists against the inventory
"""
__all__ = ["matching", "pantry", "shopping"]
