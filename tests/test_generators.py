"""Tests for the classic graph generators."""

import logging

import networkx as nx
import pytest

from graphw import (
    DuplicateLabelError,
    Graph,
    InvalidParameterError,
    NegativeSizeError,
    ParameterConstraintError,
)
from graphw.graph import generators


def degrees(g: Graph) -> list[int]:
    return [g.degree(node.label) for node in g.nodes]


class TestEmpty:
    def test_nodes_without_edges(self):
        g = Graph()
        g.add_empty(5)
        assert g.number_of_nodes() == 5
        assert g.number_of_edges() == 0
        assert [node.label for node in g.nodes] == ["0", "1", "2", "3", "4"]

    @pytest.mark.parametrize("n", [0, 1, 7])
    def test_appends_to_existing_graph(self, n):
        g = Graph()
        g.add_edge("a", "b")
        g.add_empty(n)
        assert g.number_of_nodes() == 2 + n
        assert g.number_of_edges() == 1

    def test_labels_continue_from_current_size(self):
        g = Graph()
        g.add_empty(2)
        g.add_empty(2)
        assert [node.label for node in g.nodes] == ["0", "1", "2", "3"]

    def test_negative_raises(self):
        g = Graph()
        with pytest.raises(NegativeSizeError):
            g.add_empty(-1)
        assert g.number_of_nodes() == 0


class TestComplete:
    def test_two_nodes(self):
        g = Graph()
        g.add_complete(2)
        assert g.number_of_nodes() == 2
        assert g.number_of_edges() == 1

    @pytest.mark.parametrize("n", [0, 1, 2, 5, 8])
    def test_edge_count(self, n):
        g = Graph()
        g.add_complete(n)
        assert g.number_of_nodes() == n
        assert g.number_of_edges() == n * (n - 1) // 2

    def test_matches_networkx(self):
        g = Graph()
        g.add_complete(6)
        assert nx.is_isomorphic(g.to_networkx(), nx.complete_graph(6))

    def test_negative_raises(self):
        g = Graph()
        with pytest.raises(InvalidParameterError):
            g.add_complete(-1)
        assert g.number_of_nodes() == 0
        assert g.number_of_edges() == 0

    def test_appended_clique_uses_new_ids(self):
        g = Graph()
        g.add_complete(2)
        g.add_complete(3)
        assert g.get_adjacency_list() == "0 1 \n1 0 \n2 3 4 \n3 2 4 \n4 2 3 \n"


class TestStar:
    def test_star(self):
        g = Graph()
        g.add_star(2)
        assert g.number_of_nodes() == 3
        assert g.number_of_edges() == 2
        assert g.get_neighbors("0") == ["1", "2"]

    def test_zero_leaves_is_single_node(self):
        g = Graph()
        g.add_star(0)
        assert g.number_of_nodes() == 1
        assert g.number_of_edges() == 0

    def test_negative_raises(self):
        with pytest.raises(NegativeSizeError):
            Graph().add_star(-1)


class TestWheel:
    def test_three_nodes(self):
        g = Graph()
        g.add_wheel(3)
        assert g.number_of_nodes() == 3
        assert g.number_of_edges() == 5
        assert g.get_adjacency_list() == "0 1 2 \n1 0 2 \n2 0 1 \n"

    def test_five_nodes_structure(self):
        g = Graph()
        g.add_wheel(5)
        assert g.number_of_nodes() == 5
        assert nx.is_isomorphic(g.to_networkx(), nx.wheel_graph(5))
        assert g.degree("0") == 4
        assert degrees(g)[1:] == [3, 3, 3, 3]

    @pytest.mark.parametrize("n, nodes, edges", [(0, 0, 0), (1, 1, 0), (2, 2, 1)])
    def test_small_wheels_skip_cycle(self, n, nodes, edges):
        g = Graph()
        g.add_wheel(n)
        assert g.number_of_nodes() == nodes
        assert g.number_of_edges() == edges

    def test_negative_raises(self):
        with pytest.raises(NegativeSizeError):
            Graph().add_wheel(-1)


class TestLadder:
    def test_ladder(self):
        g = Graph()
        g.add_ladder(3)
        assert g.number_of_nodes() == 6
        assert g.number_of_edges() == 7
        assert g.get_adjacency_list() == "0 1 3 \n1 0 2 4 \n2 1 5 \n3 4 0 \n4 3 5 1 \n5 4 2 \n"

    def test_matches_networkx(self):
        g = Graph()
        g.add_ladder(5)
        assert nx.is_isomorphic(g.to_networkx(), nx.ladder_graph(5))

    def test_negative_raises(self):
        g = Graph()
        with pytest.raises(NegativeSizeError):
            g.add_ladder(-1)
        assert g.number_of_nodes() == 0


class TestCircularLadder:
    def test_two_rungs_stay_open(self):
        g = Graph()
        g.add_circular_ladder(2)
        assert g.number_of_nodes() == 4
        assert g.number_of_edges() == 4

    def test_zero(self):
        g = Graph()
        g.add_circular_ladder(0)
        assert g.number_of_nodes() == 0

    def test_rails_closed(self):
        g = Graph()
        g.add_circular_ladder(4)
        assert g.number_of_edges() == 12
        assert nx.is_isomorphic(g.to_networkx(), nx.circular_ladder_graph(4))
        assert set(degrees(g)) == {3}

    def test_negative_raises(self):
        with pytest.raises(NegativeSizeError):
            Graph().add_circular_ladder(-1)


class TestCirculant:
    def test_edge_counter_counts_every_offset(self):
        g = Graph()
        g.add_circulant(2, [1, 2])
        assert g.number_of_nodes() == 2
        assert g.number_of_edges() == 4

    def test_self_loops_count_twice_in_degree(self):
        g = Graph()
        g.add_circulant(2, [1, 2])
        assert g.get_neighbors("0") == ["1", "0", "0"]
        assert g.degree("0") == 3
        assert g.degree("1") == 3
        assert g.get_adjacency_list() == "0 1 0 0 \n1 0 1 1 \n"

    def test_offsets_wrap(self):
        g = Graph()
        g.add_circulant(5, [1])
        assert g.get_neighbors("4") == ["3", "0"]
        assert nx.is_isomorphic(g.to_networkx(), nx.cycle_graph(5))

    def test_negative_offset_uses_absolute_value(self):
        g1 = Graph()
        g1.add_circulant(6, [-2])
        g2 = Graph()
        g2.add_circulant(6, [2])
        assert g1.get_adjacency_list() == g2.get_adjacency_list()

    def test_matches_networkx(self):
        g = Graph()
        g.add_circulant(10, [1, 3])
        assert nx.is_isomorphic(g.to_networkx(), nx.circulant_graph(10, [1, 3]))

    def test_zero_nodes(self):
        g = Graph()
        g.add_circulant(0, [1, 2])
        assert g.number_of_nodes() == 0

    def test_negative_raises(self):
        g = Graph()
        with pytest.raises(InvalidParameterError):
            g.add_circulant(-1, [])
        assert g.number_of_nodes() == 0
        assert g.number_of_edges() == 0


class TestBinomialTree:
    @pytest.mark.parametrize("order, nodes", [(0, 1), (1, 2), (2, 4), (3, 8), (4, 16)])
    def test_sizes(self, order, nodes):
        g = Graph()
        g.add_binomial_tree(order)
        assert g.number_of_nodes() == nodes
        assert g.number_of_edges() == nodes - 1

    def test_negative_order_is_single_node(self):
        g = Graph()
        g.add_binomial_tree(-3)
        assert g.number_of_nodes() == 1

    def test_doubling_order(self):
        g = Graph()
        g.add_binomial_tree(2)
        assert g.get_adjacency_list() == "0 1 2 \n1 0 \n2 3 0 \n3 2 \n"

    def test_matches_networkx(self):
        g = Graph()
        g.add_binomial_tree(4)
        result = g.to_networkx()
        assert nx.is_tree(result)
        assert nx.is_isomorphic(result, nx.binomial_tree(4))


class TestBalancedTree:
    def test_ternary_height_two(self):
        g = Graph()
        g.add_balanced_tree(3, 2)
        assert g.number_of_nodes() == 13
        assert g.number_of_edges() == 12
        assert nx.is_isomorphic(g.to_networkx(), nx.balanced_tree(3, 2))

    def test_zero_height(self):
        g = Graph()
        g.add_balanced_tree(2, 0)
        assert g.number_of_nodes() == 1

    def test_one_child_is_path(self):
        g = Graph()
        g.add_balanced_tree(1, 1)
        assert g.number_of_nodes() == 2
        assert g.number_of_edges() == 1

    def test_one_child_long_path(self):
        g = Graph()
        g.add_balanced_tree(1, 4)
        assert nx.is_isomorphic(g.to_networkx(), nx.path_graph(5))

    def test_zero_children(self):
        g = Graph()
        g.add_balanced_tree(0, 3)
        assert g.number_of_nodes() == 1

    def test_negative_raises(self):
        with pytest.raises(NegativeSizeError):
            Graph().add_balanced_tree(2, -1)


class TestFullMaryTree:
    def test_binary_three_nodes(self):
        g = Graph()
        g.add_full_mary_tree(2, 3)
        assert g.number_of_nodes() == 3
        assert g.number_of_edges() == 2

    def test_zero_arity_is_isolated_nodes(self):
        g = Graph()
        g.add_full_mary_tree(0, 3)
        assert g.number_of_nodes() == 3
        assert g.number_of_edges() == 0

    def test_children_numbering(self):
        g = Graph()
        g.add_full_mary_tree(3, 8)
        assert g.get_neighbors("0") == ["1", "2", "3"]
        assert g.get_neighbors("1") == ["0", "4", "5", "6"]
        assert g.get_neighbors("2") == ["0", "7"]

    def test_matches_networkx(self):
        g = Graph()
        g.add_full_mary_tree(2, 10)
        assert nx.is_isomorphic(g.to_networkx(), nx.full_rary_tree(2, 10))

    def test_negative_raises(self):
        with pytest.raises(NegativeSizeError):
            Graph().add_full_mary_tree(1, -1)


class TestBarbell:
    def test_sizes(self):
        g = Graph()
        g.add_barbell(2, 3)
        assert g.number_of_nodes() == 7
        assert g.number_of_edges() == 6

    def test_adjacency(self):
        g = Graph()
        g.add_barbell(2, 3)
        assert g.get_adjacency_list() == "0 1 \n1 0 2 \n2 3 1 \n3 2 4 \n4 3 5 \n5 6 4 \n6 5 \n"

    def test_cliques_joined_directly(self):
        g = Graph()
        g.add_barbell(3, 0)
        assert g.number_of_nodes() == 6
        assert g.number_of_edges() == 7
        assert nx.is_isomorphic(g.to_networkx(), nx.barbell_graph(3, 0))

    def test_matches_networkx(self):
        g = Graph()
        g.add_barbell(4, 2)
        assert nx.is_isomorphic(g.to_networkx(), nx.barbell_graph(4, 2))

    def test_small_clique_raises(self):
        g = Graph()
        with pytest.raises(ParameterConstraintError) as exc_info:
            g.add_barbell(0, 1)
        assert exc_info.value.parameter == "m1"
        assert exc_info.value.value == 0
        assert g.number_of_nodes() == 0

    def test_negative_path_raises(self):
        with pytest.raises(NegativeSizeError) as exc_info:
            Graph().add_barbell(2, -1)
        assert exc_info.value.parameter == "m2"


class TestLollipop:
    def test_lollipop(self):
        g = Graph()
        g.add_lollipop(3, 1)
        assert g.number_of_nodes() == 4
        assert g.number_of_edges() == 4

    def test_no_path(self):
        g = Graph()
        g.add_lollipop(3, 0)
        assert g.number_of_nodes() == 3
        assert g.number_of_edges() == 3

    def test_path_hangs_off_last_clique_node(self):
        g = Graph()
        g.add_lollipop(3, 2)
        assert g.get_neighbors("2") == ["0", "1", "3"]
        assert g.get_neighbors("4") == ["3"]
        assert nx.is_isomorphic(g.to_networkx(), nx.lollipop_graph(3, 2))

    def test_small_clique_raises(self):
        with pytest.raises(ParameterConstraintError):
            Graph().add_lollipop(1, 1)

    def test_negative_path_raises(self):
        with pytest.raises(NegativeSizeError):
            Graph().add_lollipop(3, -1)


class TestCompleteMultipartite:
    def test_three_parts(self):
        g = Graph()
        g.add_complete_multipartite([1, 2, 3])
        assert g.number_of_nodes() == 6
        assert g.number_of_edges() == 11

    def test_no_edges_within_a_part(self):
        g = Graph()
        g.add_complete_multipartite([2, 2])
        assert g.get_neighbors("0") == ["2", "3"]
        assert g.get_non_neighbors("0") == ["1"]

    def test_zero_sizes_ignored(self):
        g1 = Graph()
        g1.add_complete_multipartite([2, 0, 3])
        g2 = Graph()
        g2.add_complete_multipartite([2, 3])
        assert g1.get_adjacency_list() == g2.get_adjacency_list()

    def test_matches_networkx(self):
        g = Graph()
        g.add_complete_multipartite([2, 3, 4])
        assert nx.is_isomorphic(g.to_networkx(), nx.complete_multipartite_graph(2, 3, 4))

    def test_negative_size_raises_before_mutation(self):
        g = Graph()
        with pytest.raises(NegativeSizeError) as exc_info:
            g.add_complete_multipartite([2, -1, 3])
        assert exc_info.value.parameter == "subset_sizes[1]"
        assert g.number_of_nodes() == 0


class TestTuran:
    def test_small(self):
        g = Graph()
        g.add_turan(3, 2)
        assert g.number_of_nodes() == 3
        assert g.number_of_edges() == 2

    def test_balanced_three_parts(self):
        g = Graph()
        g.add_turan(6, 3)
        assert g.number_of_nodes() == 6
        assert g.number_of_edges() == 12
        assert degrees(g) == [4] * 6

    def test_matches_networkx(self):
        g = Graph()
        g.add_turan(13, 4)
        assert nx.is_isomorphic(g.to_networkx(), nx.turan_graph(13, 4))

    def test_r_below_one_raises(self):
        with pytest.raises(ParameterConstraintError) as exc_info:
            Graph().add_turan(1, 0)
        assert exc_info.value.parameter == "r"

    def test_r_above_n_raises(self):
        with pytest.raises(ParameterConstraintError):
            Graph().add_turan(0, 1)

    def test_negative_n_raises(self):
        with pytest.raises(NegativeSizeError):
            Graph().add_turan(-1, 1)


class TestDorogovtsevGoltsevMendes:
    @pytest.mark.parametrize("n, nodes, edges", [(0, 2, 1), (1, 3, 3), (2, 6, 9), (3, 15, 27)])
    def test_sizes(self, n, nodes, edges):
        g = Graph()
        g.add_dorogovtsev_goltsev_mendes(n)
        assert g.number_of_nodes() == nodes
        assert g.number_of_edges() == edges

    def test_matches_networkx(self):
        g = Graph()
        g.add_dorogovtsev_goltsev_mendes(3)
        assert nx.is_isomorphic(g.to_networkx(), nx.dorogovtsev_goltsev_mendes_graph(3))

    def test_negative_raises(self):
        with pytest.raises(NegativeSizeError):
            Graph().add_dorogovtsev_goltsev_mendes(-1)


class TestSimpleFamilies:
    def test_path_graph(self):
        g = Graph()
        g.add_path_graph(4)
        assert g.get_adjacency_list() == "0 1 \n1 0 2 \n2 1 3 \n3 2 \n"

    def test_cycle_graph(self):
        g = Graph()
        g.add_cycle_graph(4)
        assert g.number_of_edges() == 4
        assert nx.is_isomorphic(g.to_networkx(), nx.cycle_graph(4))

    def test_complete_bipartite(self):
        g = Graph()
        g.add_complete_bipartite(2, 3)
        assert g.number_of_edges() == 6
        assert nx.is_isomorphic(g.to_networkx(), nx.complete_bipartite_graph(2, 3))

    def test_grid_2d(self):
        g = Graph()
        g.add_grid_2d(3, 4)
        assert g.number_of_nodes() == 12
        assert g.number_of_edges() == 17
        assert nx.is_isomorphic(g.to_networkx(), nx.grid_2d_graph(3, 4))

    def test_tadpole(self):
        g = Graph()
        g.add_tadpole(4, 2)
        assert g.number_of_nodes() == 6
        expected = nx.cycle_graph(4)
        expected.add_edges_from([(3, 4), (4, 5)])
        assert nx.is_isomorphic(g.to_networkx(), expected)

    def test_tadpole_small_cycle_raises(self):
        with pytest.raises(ParameterConstraintError):
            Graph().add_tadpole(1, 2)

    @pytest.mark.parametrize(
        "method, args",
        [
            ("add_path_graph", (-1,)),
            ("add_cycle_graph", (-1,)),
            ("add_complete_bipartite", (2, -1)),
            ("add_grid_2d", (-1, 2)),
        ],
    )
    def test_negative_sizes_raise(self, method, args):
        g = Graph()
        with pytest.raises(NegativeSizeError):
            getattr(g, method)(*args)
        assert g.number_of_nodes() == 0


class TestComposition:
    def test_disjoint_union(self):
        g = Graph()
        g.add_complete(3)
        g.add_star(2)
        assert g.number_of_nodes() == 6
        assert g.number_of_edges() == 5
        assert g.get_neighbors("3") == ["4", "5"]
        assert nx.number_connected_components(g.to_networkx()) == 2

    def test_components_can_be_joined_by_caller(self):
        g = Graph()
        g.add_complete(3)
        g.add_complete(3)
        g.add_edge("2", "3")
        assert nx.is_isomorphic(g.to_networkx(), nx.barbell_graph(3, 0))

    def test_label_clash_raises_before_mutation(self):
        g = Graph()
        g.add_node("a")
        g.add_node("2")
        with pytest.raises(DuplicateLabelError) as exc_info:
            g.add_complete(3)
        assert exc_info.value.label == "2"
        assert g.number_of_nodes() == 2
        assert g.number_of_edges() == 0

    def test_directed_store(self):
        g = Graph(directed=True)
        g.add_star(3)
        assert g.get_neighbors("0") == ["1", "2", "3"]
        assert g.get_neighbors("1") == []


class TestModuleFunctions:
    def test_functions_take_graph_first(self):
        g = Graph()
        generators.turan(g, 6, 3)
        generators.empty(g, 1)
        assert g.number_of_nodes() == 7

    def test_generator_logs_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="graphw.graph.generators"):
            Graph().add_barbell(3, 1)
        assert "barbell" in caplog.text
