"""Handlers for the four record operations."""

from .add import handle_add
from .list import handle_list
from .find import handle_find
from .remove import handle_remove

__all__ = [
    "handle_add",
    "handle_list",
    "handle_find",
    "handle_remove",
]
