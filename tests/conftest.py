"""Shared fixtures for netpaths tests."""

import pytest

from netpaths import build_graph


@pytest.fixture
def basic_edges():
    """Seven-edge reference graph, A -> E shortest path is A-B-D-E (11)."""
    return [
        ("A", "B", 4),
        ("A", "C", 2),
        ("B", "C", 1),
        ("B", "D", 5),
        ("C", "D", 8),
        ("C", "E", 10),
        ("D", "E", 2),
    ]


@pytest.fixture
def city_edges():
    """Intercity network with a direct but longer Tokyo -> Osaka link."""
    return [
        ("Tokyo", "Yokohama", 30),
        ("Tokyo", "Chiba", 40),
        ("Tokyo", "Omiya", 35),
        ("Yokohama", "Chiba", 60),
        ("Omiya", "Chiba", 50),
        ("Tokyo", "Nagoya", 350),
        ("Nagoya", "Osaka", 180),
        ("Osaka", "Kyoto", 50),
        ("Kyoto", "Nagoya", 140),
        ("Tokyo", "Osaka", 500),
    ]


@pytest.fixture
def disconnected_edges():
    """Two separate pairs: A -> B and C -> D."""
    return [("A", "B", 1), ("C", "D", 2)]


@pytest.fixture
def basic_graph(basic_edges):
    return build_graph(basic_edges).unwrap()
