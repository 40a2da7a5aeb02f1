"""Library utilities for pathgraph.

This package contains integration modules for external libraries.
"""

from pathgraph.lib.nx import from_networkx, to_networkx

__all__ = [
    "from_networkx",
    "to_networkx",
]
