from ..errors import IndexOutOfRangeError
from .graph import Graph, UnweightedGraph
from .weighted_graph import WeightedGraph

__all__ = ["Graph", "UnweightedGraph", "WeightedGraph", "IndexOutOfRangeError"]
