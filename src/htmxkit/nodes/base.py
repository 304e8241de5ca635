"""Base node class for htmxkit trees."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for everything that can appear as a child in a tree.

    Nodes are immutable so a finished tree can be rendered from any number
    of threads without locking.

    """
