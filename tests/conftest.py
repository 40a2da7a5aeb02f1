"""Global pytest configuration.

Registers the shared graph fixtures from `tests.algorithms.sample_graphs` as a
plugin so every test module can request them by name. The plugin is not
imported here, which lets pytest apply assertion rewriting to it.
"""

from __future__ import annotations

from importlib.util import find_spec

pytest_plugins: list[str] = []
if find_spec("tests.algorithms.sample_graphs") is not None:
    pytest_plugins = ["tests.algorithms.sample_graphs"]
