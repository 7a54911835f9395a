"""Tests for degree, density and neighbor queries."""

import pytest

from graphw import EmptyGraphError, Graph, UnknownLabelError, parse_adjacency_list


@pytest.fixture
def triangle_with_tail():
    """a-b-c triangle with d hanging off c."""
    g = Graph()
    g.add_cycle(["a", "b", "c"])
    g.add_edge("c", "d")
    return g


class TestDegree:
    def test_degree(self, triangle_with_tail):
        assert triangle_with_tail.degree("c") == 3
        assert triangle_with_tail.degree("d") == 1

    def test_isolated_node(self):
        g = Graph()
        g.add_node("x")
        assert g.degree("x") == 0

    def test_directed_counts_outgoing(self):
        g = Graph(directed=True)
        g.add_edge("a", "b")
        assert g.degree("a") == 1
        assert g.degree("b") == 0

    def test_unknown_label(self):
        with pytest.raises(UnknownLabelError, match="Unknown node label: 'missing'"):
            Graph().degree("missing")

    def test_unknown_label_is_key_error(self):
        with pytest.raises(KeyError):
            Graph().degree("missing")


class TestAverageDegree:
    def test_average(self, triangle_with_tail):
        assert triangle_with_tail.average_degree() == pytest.approx((2 + 2 + 3 + 1) / 4)

    def test_complete_graph(self):
        g = Graph()
        g.add_complete(5)
        assert g.average_degree() == 4.0

    def test_empty_graph_raises(self):
        with pytest.raises(EmptyGraphError):
            Graph().average_degree()


class TestDensity:
    def test_complete_graph_is_one(self):
        g = Graph()
        g.add_complete(4)
        assert g.density() == 1.0

    def test_undirected(self, triangle_with_tail):
        assert triangle_with_tail.density() == pytest.approx(2 * 4 / (4 * 3))

    def test_directed(self):
        g = Graph(directed=True)
        g.add_path(["a", "b", "c"])
        assert g.density() == pytest.approx(2 / 6)

    def test_counts_duplicate_edge_calls(self):
        g = Graph()
        g.add_node("a")
        g.add_node("b")
        g.add_edge("a", "b")
        g.add_edge("a", "b")
        assert g.density() == 2.0

    @pytest.mark.parametrize("n", [0, 1])
    def test_small_graphs(self, n):
        g = Graph()
        g.add_empty(n)
        assert g.density() == 0.0


class TestNeighbors:
    def test_insertion_order(self, triangle_with_tail):
        assert triangle_with_tail.get_neighbors("c") == ["b", "a", "d"]

    def test_returns_new_list(self, triangle_with_tail):
        neighbors = triangle_with_tail.get_neighbors("a")
        neighbors.append("z")
        assert triangle_with_tail.get_neighbors("a") == ["b", "c"]

    def test_unknown_label(self):
        with pytest.raises(UnknownLabelError):
            Graph().get_neighbors("missing")

    def test_non_neighbors(self, triangle_with_tail):
        assert triangle_with_tail.get_non_neighbors("a") == ["d"]
        assert triangle_with_tail.get_non_neighbors("d") == ["a", "b"]

    def test_non_neighbors_excludes_self(self):
        g = Graph()
        g.add_empty(3)
        assert g.get_non_neighbors("1") == ["0", "2"]

    def test_non_neighbors_unknown_label(self):
        with pytest.raises(UnknownLabelError):
            Graph().get_non_neighbors("missing")

    def test_common_neighbors(self, triangle_with_tail):
        assert triangle_with_tail.get_common_neighbors("a", "b") == ["c"]
        assert triangle_with_tail.get_common_neighbors("a", "d") == ["c"]
        assert triangle_with_tail.get_common_neighbors("c", "a") == ["b"]

    def test_common_neighbors_follow_first_label_order(self):
        g = Graph()
        g.add_complete_bipartite(2, 3)
        assert g.get_common_neighbors("0", "1") == ["2", "3", "4"]

    def test_common_neighbors_unknown_label(self):
        g = Graph()
        g.add_node("x")
        with pytest.raises(UnknownLabelError):
            g.get_common_neighbors("missing", "x")
        with pytest.raises(UnknownLabelError):
            g.get_common_neighbors("x", "missing")


class TestAdjacencyList:
    def test_default_delimiter(self, triangle_with_tail):
        assert triangle_with_tail.get_adjacency_list() == "a b c \nb a c \nc b a d \nd c \n"

    def test_custom_delimiter(self):
        g = Graph()
        g.add_edge("a", "b")
        assert g.get_adjacency_list(",") == "a,b,\nb,a,\n"

    def test_isolated_node_line(self):
        g = Graph()
        g.add_empty(2)
        assert g.get_adjacency_list() == "0 \n1 \n"

    def test_empty_graph(self):
        assert Graph().get_adjacency_list() == ""

    def test_round_trip_structure(self):
        g = Graph()
        g.add_barbell(3, 2)
        g.add_turan(6, 3)
        relation = parse_adjacency_list(g.get_adjacency_list())

        assert list(relation) == [node.label for node in g.nodes]
        for label, neighbors in relation.items():
            assert neighbors == g.get_neighbors(label)

    def test_round_trip_custom_delimiter(self):
        g = Graph(directed=True)
        g.add_cycle(["x", "y", "z"])
        relation = parse_adjacency_list(g.get_adjacency_list("\t"), "\t")
        assert relation == {"x": ["y"], "y": ["z"], "z": ["x"]}
