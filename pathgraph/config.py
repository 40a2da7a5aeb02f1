"""Configuration classes for pathgraph traversals."""

from dataclasses import dataclass


@dataclass
class PathSearchConfig:
    """Configuration for simple-path enumeration."""

    # Expand neighbors in sorted order so results come back in a reproducible
    # order. Node keys must then be mutually orderable.
    sort_neighbors: bool = False

    # Emit a DEBUG record for every completed path
    log_paths: bool = False


# Global configuration instance
SEARCH_CONFIG = PathSearchConfig()
