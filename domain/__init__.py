"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- schemas: Pydantic models for categories, records and tree nodes
- taxonomy: Record storage, tree building, filtering and tree navigation
"""

from domain.schemas import Category, Forest, NodePath, TaxonomyRecord, TreeNode

__all__ = [
    "Category",
    "TaxonomyRecord",
    "TreeNode",
    "Forest",
    "NodePath",
]
