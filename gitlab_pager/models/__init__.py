"""Data models.

Architecture:
    Pydantic v2 models, frozen so parsed values cannot be modified while a
    query is in flight. Resource payloads are decoded into caller-supplied
    item types; this package only holds the models the pagination layer
    itself produces.
"""

from .link import LinkEntry

__all__ = ["LinkEntry"]
