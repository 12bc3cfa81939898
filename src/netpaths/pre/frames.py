# -*- coding: utf-8 -*-
"""
Edge list ingestion from DataFrames.

Edge lists often live in tables with one row per directed edge and the columns
``['from', 'to', 'weight']``. This module reads such tables from Polars or Pandas
DataFrames and feeds them to `netpaths.pre.builder.build_graph`.

Notes
-----
- Column names are taken from ``GraphConfig`` (``source_column``, ``target_column``,
  ``weight_column``); extra columns are ignored.
- Missing values (Polars nulls, Pandas NaN) reach the validator unchanged and are reported
  as invalid nodes or weights.
"""

from __future__ import annotations

from typing import List, Optional, Union

import pandas as pd
import polars as pl
from result import Err, Ok, Result

from netpaths.pre.builder import build_graph
from netpaths.utils.config import GraphConfig, resolve_config
from netpaths.utils.constant import REASON_MISSING_COLUMNS
from netpaths.utils.errors import GraphError, InvalidGraph
from netpaths.utils.types import Edge, Graph
from netpaths.utils.utils import echo

__all__ = ["edges_from_frame", "build_graph_from_frame"]


def edges_from_frame(
    frame: Union[pl.DataFrame, pd.DataFrame],
    *,
    config: Optional[Union[dict, GraphConfig]] = None,
) -> Result[List[Edge], GraphError]:
    """
    Read the rows of an edge list table as raw ``Edge`` tuples (not yet validated).

    Parameters
    ----------
    frame : pl.DataFrame or pd.DataFrame
        Edge list table with the source, target and weight columns.
    config : dict or GraphConfig, optional
        Provides the column names.

    Returns
    -------
    Ok(list of Edge)
        One edge per row, in row order.
    Err(InvalidGraph)
        If any of the required columns is missing, with the reason
        ``"Missing required columns: <names>"``.

    Raises
    ------
    TypeError
        If `frame` is neither a Polars nor a Pandas DataFrame.

    Examples
    --------
    >>> frame = pl.DataFrame({"from": ["A", "B"], "to": ["B", "C"], "weight": [1.0, 2.5]})
    >>> edges_from_frame(frame).unwrap()
    [Edge(source='A', target='B', weight=1.0), Edge(source='B', target='C', weight=2.5)]
    """
    config = resolve_config(config)
    columns = config.columns

    if not isinstance(frame, (pl.DataFrame, pd.DataFrame)):
        raise TypeError("The 'frame' must be a Polars or Pandas DataFrame.")

    missing_columns = [column for column in columns if column not in frame.columns]
    if missing_columns:
        reason = f"{REASON_MISSING_COLUMNS}: {', '.join(missing_columns)}"
        echo(f"Edge list not read: {reason}.", config)
        return Err(InvalidGraph(reason=reason))

    if isinstance(frame, pl.DataFrame):
        rows = frame.select(columns).iter_rows()
    else:
        # Pandas keeps mixed node types in object columns, Polars would reject them
        rows = frame[columns].itertuples(index=False, name=None)

    return Ok([Edge(*row) for row in rows])


def build_graph_from_frame(
    frame: Union[pl.DataFrame, pd.DataFrame],
    *,
    config: Optional[Union[dict, GraphConfig]] = None,
) -> Result[Graph, GraphError]:
    """
    Build a graph from an edge list table.

    Equivalent to ``build_graph(edges_from_frame(frame).ok_value)``: a table without rows
    gives ``Err(EmptyGraph)``, and row validation follows ``validate_edges``.

    Parameters
    ----------
    frame : pl.DataFrame or pd.DataFrame
        Edge list table.
    config : dict or GraphConfig, optional
        Column names and console output.

    Returns
    -------
    Ok(Graph) or Err(GraphError)
    """
    config = resolve_config(config)

    edges = edges_from_frame(frame, config=config)
    if edges.is_err():
        return edges

    return build_graph(edges.ok_value, config=config)
