# constgraphs/__init__.py
"""constgraphs: fixed-size adjacency-matrix graphs."""
from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    "adapters": "constgraphs.adapters",
    "core": "constgraphs.core",
    "utils": "constgraphs.utils",
    "dataframe": "constgraphs.adapters.dataframe_adapter",
    "networkx": "constgraphs.adapters.networkx",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core
    "Graph": ("constgraphs.core.graph", "Graph"),
    "UnweightedGraph": ("constgraphs.core.graph", "UnweightedGraph"),
    "WeightedGraph": ("constgraphs.core.weighted_graph", "WeightedGraph"),
    "IndexOutOfRangeError": ("constgraphs.errors", "IndexOutOfRangeError"),

    # Polars edge lists
    "to_dataframe": ("constgraphs.adapters.dataframe_adapter", "to_dataframe"),
    "from_dataframe": ("constgraphs.adapters.dataframe_adapter", "from_dataframe"),

    # NetworkX adapter (optional dependency)
    "to_nx": ("constgraphs.adapters.networkx", "to_nx"),
    "from_nx": ("constgraphs.adapters.networkx", "from_nx"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("constgraphs")
except PackageNotFoundError:
    __version__ = "0.0.0"
