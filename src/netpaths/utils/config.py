# -*- coding: utf-8 -*-
"""
Configuration container for the netpaths package.

This module defines the dataclass `GraphConfig`, which centralizes the user-facing
parameters shared by graph construction, path queries, analysis and export.

**Use ``GraphConfig.describe()`` to display a clean summary of current settings.**

Notes
-----
* Every public netpaths function accepts ``config`` as ``None``, a ``dict`` or a
  ``GraphConfig``; see `resolve_config`.
* Invalid settings are programming errors: they raise ``TypeError`` / ``ValueError``
  instead of being returned as ``Err`` results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from netpaths.utils.constant import DEFAULT_COLUMNS

__all__ = ["GraphConfig", "resolve_config"]


# -----------------------------------------------------------------------------
# GraphConfig
# -----------------------------------------------------------------------------
@dataclass
class GraphConfig:
    """
    Base configuration class for netpaths functions, with validation of its fields.

    **Use ``GraphConfig.describe()`` to display a clean summary of current settings.**

    Notes
    -----
    When initializing ``GraphConfig`` **directly** with a dictionary, you must unpack it
    with ``**param`` so that keys map to dataclass fields. netpaths functions accept
    either a ``dict`` or an existing ``GraphConfig`` and handle the conversion.

    Examples
    --------
        # Direct instantiation (unpack required):
        >>> config = GraphConfig(**{"main_print": True, "weight_column": "time"})
        >>> build_graph_from_frame(frame, config=config)  # doctest: +SKIP

        >>> build_graph(edges, config={"main_print": True})  # doctest: +SKIP

    Attributes
    ----------
    main_print : bool
        Controls whether execution information (graph size, path found, analysis
        summary) is printed to the console.
    source_column : str
        Name of the edge list column holding the edge start node. Default ``'from'``.
    target_column : str
        Name of the edge list column holding the edge end node. Default ``'to'``.
    weight_column : str
        Name of the edge list column holding the edge weight. Default ``'weight'``.
    """

    main_print: bool = False  # Toggles execution information in the console.
    source_column: str = DEFAULT_COLUMNS["source_column"]
    target_column: str = DEFAULT_COLUMNS["target_column"]
    weight_column: str = DEFAULT_COLUMNS["weight_column"]

    def validate(self) -> GraphConfig:
        """
        Validate field types and the edge list column names.
        """
        self._validate_types()
        self._validate_columns()
        return self

    def _validate_types(self) -> None:
        """
        Explicitly validate types for each field.
        """
        type_map = {
            "main_print": (bool,),
            "source_column": (str,),
            "target_column": (str,),
            "weight_column": (str,),
        }

        for field_name, expected_types in type_map.items():
            value = getattr(self, field_name)
            if not isinstance(value, expected_types):
                raise TypeError(
                    f"Parameter '{field_name}' must be of type {expected_types}, got {type(value).__name__}."
                )

    def _validate_columns(self) -> None:
        """
        Column names must be non-empty and distinct.
        """
        columns = self.columns
        if any(not column for column in columns):
            raise ValueError("Edge list column names must be non-empty strings.")
        if len(set(columns)) != len(columns):
            raise ValueError(
                f"Edge list column names must be distinct, got: {', '.join(columns)}"
            )

    @property
    def columns(self) -> list:
        """Edge list columns in ``[source, target, weight]`` order."""
        return [self.source_column, self.target_column, self.weight_column]

    def describe(self) -> None:
        """
        Display a summary of the current configuration.
        """
        print("\nGraphConfig:")
        print(f" - Source column            : {self.source_column}")
        print(f" - Target column            : {self.target_column}")
        print(f" - Weight column            : {self.weight_column}")
        print(f" - Print summary            : {self.main_print}")


def resolve_config(param: Optional[Union[dict, GraphConfig]]) -> GraphConfig:
    """
    Turn the ``config`` argument of a public function into a validated `GraphConfig`.

    Parameters
    ----------
    param : dict, GraphConfig or None
        ``None`` gives the defaults, a ``dict`` is unpacked into ``GraphConfig``.

    Returns
    -------
    GraphConfig

    Raises
    ------
    TypeError
        If `param` has another type, or a field has a wrong type.
    ValueError
        If the column names are empty or not distinct.
    """
    # Case 1: no configuration
    if param is None:
        return GraphConfig()

    # Case 2: param is a dictionary
    if isinstance(param, dict):
        return GraphConfig(**param).validate()

    # Case 3: param is already a GraphConfig
    if isinstance(param, GraphConfig):
        return param.validate()

    raise TypeError(
        f"'config' must be a dict, a GraphConfig or None, got {type(param).__name__}."
    )
