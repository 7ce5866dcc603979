"""Unit tests for Edge and the numeric vertex ordering helpers."""

import dataclasses

import pytest

from src.graph import Edge, compare_vertices, sort_vertices, vertex_sort_key


class TestEdge:
    """Test the Edge value type."""

    def test_structural_equality(self):
        """Edges with the same endpoints are equal and hash alike."""
        assert Edge(1, 2) == Edge(1, 2)
        assert hash(Edge(1, 2)) == hash(Edge(1, 2))
        assert Edge(1, 2) != Edge(2, 1)

    def test_set_membership(self):
        """A fresh edge is found in a set built from other instances."""
        edges = {Edge("1", "2"), Edge("2", "3")}

        assert Edge("2", "3") in edges
        assert Edge("3", "2") not in edges

    def test_self_loop(self):
        """Self-loops are allowed and detected."""
        assert Edge(4, 4).is_self_loop
        assert not Edge(4, 5).is_self_loop

    def test_reversed(self):
        """reversed swaps the endpoints."""
        assert Edge(1, 2).reversed() == Edge(2, 1)

    def test_immutable(self):
        """Edges cannot be modified."""
        edge = Edge(1, 2)

        with pytest.raises(dataclasses.FrozenInstanceError):
            edge.source = 3


class TestOrdering:
    """Test the numeric vertex ordering."""

    def test_sort_key(self):
        """The sort key is the integer value of the string form."""
        assert vertex_sort_key("10") == 10
        assert vertex_sort_key(7) == 7
        assert vertex_sort_key("-3") == -3

    def test_sort_numeric_strings(self):
        """Strings sort by value, not lexicographically."""
        assert sort_vertices(["10", "9", "100", "1"]) == ["1", "9", "10", "100"]

    def test_compare(self):
        """compare_vertices is a three-way comparator."""
        assert compare_vertices("2", "10") == -1
        assert compare_vertices(10, "10") == 0
        assert compare_vertices(11, 3) == 1

    def test_non_numeric_vertex(self):
        """Vertices without an integer form cannot be ordered."""
        with pytest.raises(ValueError):
            vertex_sort_key("a")
