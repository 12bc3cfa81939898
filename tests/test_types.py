"""Tests for utils/types.py, utils/errors.py and the Ok / Err results."""

import math
from fractions import Fraction

import pytest

from netpaths import (
    Edge,
    EmptyGraph,
    Err,
    Graph,
    InvalidGraph,
    NodeNotFound,
    NoPath,
    Ok,
    ShortestPath,
    UnwrapError,
    is_valid_node,
    is_valid_weight,
)


class TestPredicates:
    """Tests for is_valid_node and is_valid_weight."""

    @pytest.mark.parametrize("node", ["A", "", "東京", 0, -3, 2.5, 10**400, Fraction(1, 3)])
    def test_valid_nodes(self, node):
        assert is_valid_node(node)

    @pytest.mark.parametrize(
        "node", [None, True, False, math.nan, math.inf, ["A"], {"id": "A"}, ("A",)]
    )
    def test_invalid_nodes(self, node):
        assert not is_valid_node(node)

    @pytest.mark.parametrize("weight", [0, 0.0, 1, 2.5, 1e9, 10**400])
    def test_valid_weights(self, weight):
        assert is_valid_weight(weight)

    @pytest.mark.parametrize("weight", [-1, -0.5, math.nan, math.inf, -math.inf, "1", None, True])
    def test_invalid_weights(self, weight):
        assert not is_valid_weight(weight)


class TestGraph:
    """Tests for the immutable Graph mapping."""

    @pytest.fixture
    def graph(self):
        return Graph(
            {
                "A": [Edge("A", "B", 1), Edge("A", "B", 2)],
                "B": [],
            }
        )

    def test_mapping_interface(self, graph):
        assert list(graph) == ["A", "B"]
        assert len(graph) == 2
        assert "A" in graph
        assert "Z" not in graph
        assert graph["B"] == ()

    def test_outgoing_edges_are_tuples(self, graph):
        assert graph["A"] == (Edge("A", "B", 1), Edge("A", "B", 2))

    def test_counts(self, graph):
        assert graph.number_of_nodes() == 2
        assert graph.number_of_edges() == 2
        assert list(graph.edges()) == [Edge("A", "B", 1), Edge("A", "B", 2)]

    def test_item_assignment_rejected(self, graph):
        with pytest.raises(TypeError):
            graph["C"] = ()

    def test_copy_on_construction(self):
        source = {"A": [Edge("A", "B", 1)], "B": []}
        graph = Graph(source)
        source["A"].append(Edge("A", "C", 1))
        assert graph["A"] == (Edge("A", "B", 1),)

    def test_equality_by_content(self, graph):
        assert graph == Graph({"A": (Edge("A", "B", 1), Edge("A", "B", 2)), "B": ()})

    def test_empty_graph(self):
        assert len(Graph()) == 0
        assert repr(Graph()) == "Graph(nodes=0, edges=0)"


class TestShortestPath:
    def test_nb_edges(self):
        assert ShortestPath(path=("A", "B", "C"), distance=3).nb_edges == 2
        assert ShortestPath(path=("A",), distance=0).nb_edges == 0


class TestErrors:
    """Tests for the error variants."""

    def test_kind_tags(self):
        assert EmptyGraph().kind == "EmptyGraph"
        assert InvalidGraph(reason="x").kind == "InvalidGraph"
        assert NodeNotFound(node="Z").kind == "NodeNotFound"
        assert NoPath(source="A", target="C").kind == "NoPath"

    def test_equality_by_value(self):
        assert EmptyGraph() == EmptyGraph()
        assert InvalidGraph(reason="x") == InvalidGraph(reason="x")
        assert NodeNotFound(node=1) != NodeNotFound(node=2)
        assert NoPath(source="A", target="C") == NoPath(source="A", target="C")

    def test_messages(self):
        assert str(InvalidGraph(reason="Invalid node type")) == "InvalidGraph: Invalid node type"
        assert "'Z'" in str(NodeNotFound(node="Z"))
        assert "'A'" in str(NoPath(source="A", target="C"))


class TestResult:
    """Tests for Ok / Err."""

    def test_ok(self):
        result = Ok(3)
        assert result.is_ok() and not result.is_err()
        assert result.unwrap() == 3
        assert result.unwrap_or(0) == 3
        with pytest.raises(UnwrapError):
            result.unwrap_err()

    def test_err(self):
        result = Err(EmptyGraph())
        assert result.is_err() and not result.is_ok()
        assert result.unwrap_err() == EmptyGraph()
        assert result.unwrap_or(0) == 0
        with pytest.raises(UnwrapError, match="EmptyGraph"):
            result.unwrap()

    def test_values_and_equality(self):
        assert Ok(3).ok_value == 3
        assert Err(EmptyGraph()).err_value == EmptyGraph()
        assert Ok(3) == Ok(3) and Ok(3) != Err(3)
        assert Err(NoPath(source="A", target="C")) == Err(NoPath(source="A", target="C"))
