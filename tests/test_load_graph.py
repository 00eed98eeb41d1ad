import pytest

from flowroute.domain.errors import GraphError
from flowroute.graph.load_graph import build_graph
from flowroute.graph.weights import init_edge_weights


def test_build_graph_keeps_node_attributes(campus):
    library = campus.get_node(2)

    assert library is not None
    assert library.attributes == {"name": "Library"}
    assert campus.node_ids == (1, 2, 3, 4, 5)


def test_build_graph_edges_keep_input_order(campus):
    assert [(e.from_id, e.to_id) for e in campus.outgoing(1)] == [(1, 2), (1, 4)]
    assert not campus.is_weighted


def test_build_graph_defaults():
    graph = build_graph({"nodes": [{"id": "a"}, {"id": "b"}], "edges": [{"from": "a", "to": "b"}]})

    edge = graph.edges[0]
    assert edge.distance == 0.0
    assert edge.flow == {}
    assert edge.weight is None


def test_build_graph_null_coefficient_falls_back_to_default():
    graph = build_graph(
        {
            "nodes": [{"id": 1}, {"id": 2}],
            "edges": [{"from": 1, "to": 2, "distance": 10, "flow": {"morning": None, "noon": 0.5}}],
        }
    )

    assert graph.edges[0].flow == {"noon": 0.5}
    assert init_edge_weights(graph, "morning").edges[0].weight == pytest.approx(12)


def test_build_graph_carries_existing_weight():
    graph = build_graph(
        {
            "nodes": [{"id": 1}, {"id": 2}],
            "edges": [{"from": 1, "to": 2, "distance": 3, "weight": 4.5}],
        }
    )

    assert graph.is_weighted
    assert graph.edges[0].weight == 4.5


def test_build_graph_empty_input():
    graph = build_graph({})

    assert graph.nodes == ()
    assert graph.edges == ()


def test_build_graph_warns_on_dangling_edges(caplog):
    with caplog.at_level("WARNING"):
        build_graph({"nodes": [{"id": 1}], "edges": [{"from": 1, "to": 2, "distance": 1}]})

    assert "Edges reference unknown nodes" in caplog.text


@pytest.mark.parametrize(
    "data",
    [
        {"nodes": [{"name": "no id"}]},
        {"nodes": [{"id": 1}, {"id": 1}]},
        {"nodes": [{"id": 1}], "edges": [{"to": 1}]},
        {"nodes": [{"id": 1}], "edges": [{"from": 1, "to": 1, "distance": "far"}]},
        {"nodes": [{"id": 1}], "edges": [{"from": 1, "to": 1, "distance": -2}]},
        {"nodes": [{"id": 1}], "edges": [{"from": 1, "to": 1, "flow": [0.1]}]},
        {"nodes": [{"id": 1}], "edges": [{"from": 1, "to": 1, "flow": {"noon": -0.5}}]},
    ],
)
def test_build_graph_rejects_malformed_records(data):
    with pytest.raises(GraphError):
        build_graph(data)


def test_graph_error_wraps_cause():
    with pytest.raises(GraphError) as excinfo:
        build_graph({"nodes": [{"id": 1}], "edges": [{"from": 1, "to": 1, "distance": "far"}]})

    assert isinstance(excinfo.value.cause, ValueError)
    assert excinfo.value.record == {"from": 1, "to": 1, "distance": "far"}
