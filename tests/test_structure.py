"""Tests for analysis/structure.py - structural graph analysis."""

import random

import networkx as nx
import pytest

from netpaths import EmptyGraph, Graph, GraphAnalysis, analyze_graph, build_graph


class TestAnalyzeGraph:
    """Tests for analyze_graph."""

    def test_connected_graph(self, basic_graph):
        analysis = analyze_graph(basic_graph).unwrap()

        assert isinstance(analysis, GraphAnalysis)
        assert analysis.node_count == 5
        assert analysis.edge_count == 7
        assert analysis.is_connected is True
        assert len(analysis.components) == 1
        assert set(analysis.components[0]) == {"A", "B", "C", "D", "E"}
        assert analysis.density == pytest.approx(7 / 20)

    def test_disconnected_graph(self):
        graph = build_graph([("A", "B", 1), ("C", "D", 1)]).unwrap()
        analysis = analyze_graph(graph).unwrap()

        assert analysis.node_count == 4
        assert analysis.edge_count == 2
        assert analysis.is_connected is False
        assert sorted(len(c) for c in analysis.components) == [2, 2]
        assert {frozenset(c) for c in analysis.components} == {
            frozenset({"A", "B"}),
            frozenset({"C", "D"}),
        }
        assert analysis.density == pytest.approx(2 / 12)

    def test_components_in_discovery_order(self):
        graph = build_graph(
            [("G1_A", "G1_B", 1), ("G1_B", "G1_C", 2), ("G2_X", "G2_Y", 3), ("G3_P", "G3_Q", 4)]
        ).unwrap()
        analysis = analyze_graph(graph).unwrap()
        assert [len(c) for c in analysis.components] == [3, 2, 2]
        assert analysis.components[0][0] == "G1_A"

    def test_nodes_inside_component_follow_graph_order(self):
        # keys C, B first, then the destination-only node A
        graph = build_graph([("C", "A", 1), ("B", "A", 1)]).unwrap()
        assert analyze_graph(graph).unwrap().components == (("C", "B", "A"),)

    def test_components_match_networkx(self, city_edges):
        graph = build_graph(city_edges).unwrap()
        reference = nx.MultiDiGraph()
        reference.add_edges_from((u, v) for u, v, _ in city_edges)
        expected = {frozenset(c) for c in nx.weakly_connected_components(reference)}
        assert {frozenset(c) for c in analyze_graph(graph).unwrap().components} == expected

    def test_incoming_edges_connect(self):
        # A -> B <- C: C only reaches B backwards
        graph = build_graph([("A", "B", 1), ("C", "B", 1)]).unwrap()
        analysis = analyze_graph(graph).unwrap()
        assert analysis.is_connected is True
        assert set(analysis.components[0]) == {"A", "B", "C"}

    def test_empty_graph(self):
        assert analyze_graph(Graph()).err_value == EmptyGraph()

    def test_single_node_self_loop(self):
        analysis = analyze_graph(build_graph([("A", "A", 1)]).unwrap()).unwrap()
        assert analysis.node_count == 1
        assert analysis.edge_count == 1
        assert analysis.is_connected is True
        assert analysis.components == (("A",),)
        assert analysis.density == 0

    def test_density_is_not_capped(self):
        graph = build_graph([("A", "B", 1), ("A", "B", 2), ("A", "B", 3)]).unwrap()
        analysis = analyze_graph(graph).unwrap()
        assert analysis.edge_count == 3
        assert analysis.density == pytest.approx(1.5)

    def test_complete_directed_graph_density(self):
        nodes = ["A", "B", "C"]
        edges = [(u, v, 1) for u in nodes for v in nodes if u != v]
        analysis = analyze_graph(build_graph(edges).unwrap()).unwrap()
        assert analysis.density == pytest.approx(1.0)

    def test_graph_is_not_modified(self, basic_edges, basic_graph):
        analyze_graph(basic_graph)
        assert basic_graph == build_graph(basic_edges).unwrap()

    def test_describe(self, capsys, basic_graph):
        analyze_graph(basic_graph).unwrap().describe()
        out = capsys.readouterr().out
        assert "GraphAnalysis" in out
        assert "0.350" in out

    def test_console_output(self, capsys, basic_graph):
        analyze_graph(basic_graph, config={"main_print": True})
        assert "1 component(s)" in capsys.readouterr().out

    @pytest.mark.parametrize("seed", range(10))
    def test_components_partition_nodes(self, seed):
        rng = random.Random(seed)
        edges = [(rng.randint(0, 15), rng.randint(0, 15), 1) for _ in range(rng.randint(1, 12))]
        graph = build_graph(edges).unwrap()
        analysis = analyze_graph(graph).unwrap()

        members = [node for component in analysis.components for node in component]
        assert len(members) == analysis.node_count
        assert set(members) == set(graph)
        assert analysis.is_connected == (len(analysis.components) == 1)
        assert analysis.edge_count == len(edges)
