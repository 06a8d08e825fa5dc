"""Tests for the shortest-path tree engine."""
import math

from graphalgebra import ERROR_ID, ErrorKind, VisitState


class TestDijkstra:
    """Tests for dijkstra_mst."""

    def test_prefers_cheaper_two_hop_path(self, build):
        graph, ids = build("ABC", [("A", "B", 1), ("B", "C", 2), ("A", "C", 5)])
        result = graph.dijkstra_mst(ids["A"])

        assert result.ok
        assert result.graph is graph
        assert graph.distances() == {ids["A"]: 0, ids["B"]: 1, ids["C"]: 3}

        node_c = graph.find_node(ids["C"])
        edge_bc = graph.find_node(ids["B"]).aEdge[0]
        edge_ac = graph.find_node(ids["A"]).aEdge[1]
        assert node_c.lNodeID_previous == ids["B"]
        assert node_c.lEdgeID_previous == edge_bc.lEdgeID
        assert edge_bc.iFlag_mst
        assert not edge_ac.iFlag_mst

    def test_source_has_no_back_pointer(self, build):
        graph, ids = build("AB", [("A", "B", 1), ("A", "A", 0)])
        graph.dijkstra_mst(ids["A"])
        source = graph.find_node(ids["A"])
        assert source.dDistance == 0
        assert source.lNodeID_previous == ERROR_ID
        assert source.lEdgeID_previous == ERROR_ID

    def test_unreachable_nodes_stay_infinite(self, build):
        graph, ids = build("ABD", [("A", "B", 1), ("D", "A", 1)])
        graph.dijkstra_mst(ids["A"])
        node_d = graph.find_node(ids["D"])

        assert math.isinf(node_d.dDistance)
        assert node_d.lEdgeID_previous == ERROR_ID
        assert node_d.eState == VisitState.UNVISITED
        assert graph.find_node(ids["B"]).eState == VisitState.FINALIZED
        assert graph.shortest_path(ids["D"]) == []

    def test_ties_follow_insertion_order(self, build):
        graph, ids = build("ABCD", [("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1)])
        graph.dijkstra_mst(ids["A"])
        assert graph.find_node(ids["D"]).lNodeID_previous == ids["B"]

    def test_shortest_path_and_tree_edges(self, build):
        graph, ids = build("ABC", [("A", "B", 1), ("B", "C", 2), ("A", "C", 5)])
        graph.dijkstra_mst(ids["A"])
        assert graph.shortest_path(ids["C"]) == [ids["A"], ids["B"], ids["C"]]
        assert [tuple(edge.aEndpoint) for edge in graph.mst_edges()] == [
            (ids["A"], ids["B"]), (ids["B"], ids["C"])]

    def test_rerun_clears_previous_tree(self, build):
        graph, ids = build("ABC", [("A", "B", 1), ("B", "C", 2), ("C", "A", 1)])
        graph.dijkstra_mst(ids["A"])
        graph.dijkstra_mst(ids["C"])

        assert graph.distances() == {ids["A"]: 1, ids["B"]: 2, ids["C"]: 0}
        assert [tuple(edge.aEndpoint) for edge in graph.mst_edges()] == [
            (ids["A"], ids["B"]), (ids["C"], ids["A"])]

    def test_unknown_source(self, build):
        graph, _ = build("AB", [("A", "B", 1)])
        result = graph.dijkstra_mst(42)
        assert result.error == ErrorKind.NOT_FOUND
        assert not result.ok

    def test_shortest_path_needs_a_tree(self, build, caplog):
        graph, ids = build("AB", [("A", "B", 1)])
        assert graph.shortest_path(ids["B"]) == []
        assert "no shortest-path tree" in caplog.text

    def test_shortest_path_to_source_and_after_rerun(self, build):
        graph, ids = build("ABC", [("A", "B", 1), ("B", "C", 2), ("C", "A", 1)])
        graph.dijkstra_mst(ids["A"])
        assert graph.shortest_path(ids["A"]) == [ids["A"]]

        graph.dijkstra_mst(ids["C"])
        assert graph.shortest_path(ids["B"]) == [ids["C"], ids["A"], ids["B"]]
