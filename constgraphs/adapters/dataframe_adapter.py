from __future__ import annotations

import logging
from typing import Optional, Union

import polars as pl

from ..core.graph import Graph
from ..core.weighted_graph import WeightedGraph

logger = logging.getLogger(__name__)


def to_dataframe(graph: Union[Graph, WeightedGraph]) -> pl.DataFrame:
    """
    Export a graph as a Polars edge list.

    One row per present cell in row-major order, with ``source`` and ``target``
    columns (Int64) and, for a ``WeightedGraph``, a ``weight`` column (Float64).
    Self-loops appear as rows with ``source == target``.

    Args:
        graph: Graph instance to export

    Returns:
        Polars DataFrame, empty (with schema) when the graph has no edges
    """
    schema = {"source": pl.Int64, "target": pl.Int64}
    if isinstance(graph, WeightedGraph):
        schema["weight"] = pl.Float64
    rows = list(graph.edges())
    df = pl.DataFrame(rows, schema=schema, orient="row")
    logger.debug("exported %r to a %d-row dataframe", graph, df.height)
    return df


def from_dataframe(
    df: pl.DataFrame,
    *,
    size: Optional[int] = None,
    weighted: Optional[bool] = None,
) -> Union[Graph, WeightedGraph]:
    """
    Build a graph from a Polars edge list.

    Args:
        df: DataFrame with integer ``source`` and ``target`` columns and an
            optional ``weight`` column
        size: Number of vertices; defaults to the largest endpoint plus one
        weighted: Build a WeightedGraph; defaults to whether ``weight`` exists

    Returns:
        Graph or WeightedGraph with one directed edge per row

    Raises:
        ValueError: missing columns, a null endpoint or weight, or size cannot
            be inferred from an empty frame
        IndexOutOfRangeError: an endpoint is outside [0, size)
    """
    missing = {"source", "target"} - set(df.columns)
    if missing:
        raise ValueError(f"edge dataframe is missing columns: {sorted(missing)}")
    if weighted is None:
        weighted = "weight" in df.columns
    if weighted and "weight" not in df.columns:
        raise ValueError("weighted=True requires a 'weight' column")

    columns = ["source", "target", "weight"] if weighted else ["source", "target"]
    nulls = df.select(columns).with_row_index("row").filter(
        pl.any_horizontal(pl.col(columns).is_null())
    )
    if nulls.height:
        raise ValueError(f"edge dataframe has nulls in row {nulls['row'][0]}")

    if size is None:
        if df.height == 0:
            raise ValueError("cannot infer the size of an empty edge list; pass size=")
        size = int(max(df["source"].max(), df["target"].max())) + 1

    graph = WeightedGraph(size) if weighted else Graph(size)
    for row in df.select(columns).iter_rows():
        graph.add_edge(*row)
    logger.debug("imported %r from a %d-row dataframe", graph, df.height)
    return graph
