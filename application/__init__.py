"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing the interactive browsing session and the one-shot listing.
"""

from application.browser import Action, TaxonomyBrowser
from application.listing import (
    UsageError,
    format_record,
    list_records,
    render_listing,
    resolve_category,
    resolve_filter,
)
from application.viewport import calculate_visible_range, scrollbar_thumb

__all__ = [
    # Interactive browsing
    "TaxonomyBrowser",
    "Action",
    "calculate_visible_range",
    "scrollbar_thumb",
    # Listing
    "UsageError",
    "resolve_category",
    "resolve_filter",
    "list_records",
    "format_record",
    "render_listing",
]
