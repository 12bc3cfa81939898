"""Tests for post/export.py - Pandas and NetworkX export."""

import networkx as nx
import pytest

from netpaths import build_graph, find_paths
from netpaths.post import edges_to_pandas, to_networkx


class TestEdgesToPandas:
    """Tests for edges_to_pandas."""

    def test_one_row_per_edge(self, basic_graph, basic_edges):
        df = edges_to_pandas(basic_graph)
        assert list(df.columns) == ["from", "to", "weight"]
        assert len(df) == len(basic_edges)
        assert list(df.itertuples(index=False, name=None)) == [
            (s, t, float(w)) for s, t, w in basic_edges
        ]

    def test_custom_columns(self, basic_graph):
        df = edges_to_pandas(basic_graph, config={"weight_column": "time"})
        assert list(df.columns) == ["from", "to", "time"]

    def test_mixed_node_types(self):
        graph = build_graph([("A", 1, 2.0)]).unwrap()
        df = edges_to_pandas(graph)
        assert df["from"].tolist() == ["A"]
        assert df["to"].tolist() == [1]


class TestToNetworkx:
    """Tests for to_networkx."""

    def test_nodes_and_edges(self, basic_graph):
        nx_graph = to_networkx(basic_graph)
        assert isinstance(nx_graph, nx.MultiDiGraph)
        assert set(nx_graph.nodes) == set(basic_graph)
        assert nx_graph.number_of_edges() == basic_graph.number_of_edges()

    def test_parallel_edges_kept(self):
        graph = build_graph([("A", "B", 3), ("A", "B", 1)]).unwrap()
        nx_graph = to_networkx(graph)
        assert nx_graph.number_of_edges("A", "B") == 2

    @pytest.mark.parametrize("target", ["B", "C", "D", "E"])
    def test_same_distances_as_networkx(self, basic_graph, target):
        nx_graph = to_networkx(basic_graph)
        expected = nx.dijkstra_path_length(nx_graph, "A", target, weight="weight")
        assert find_paths(basic_graph, "A", target).ok_value.distance == expected

    def test_console_output(self, capsys, basic_graph):
        to_networkx(basic_graph, config={"main_print": True})
        assert "NetworkX graph created successfully with 5 nodes and 7 edges." in capsys.readouterr().out
