import torch

from hclust import CentroidLinkage, MergeEvent
from hclust.reporting import (
    format_cluster,
    format_distance_matrix,
    format_matrix,
    format_merge_event,
    format_merge_report,
    format_vector,
)


def test_format_cluster():
    assert format_cluster([0, 1, 4]) == "Cluster { 0, 1, 4 }"
    assert format_cluster((7,)) == "Cluster { 7 }"


def test_format_merge_event():
    event = MergeEvent(step=2, cluster_a=(0, 1), cluster_b=(2,), distance=13.793114, merged=(0, 1, 2))
    assert format_merge_event(event) == (
        "Cluster { 0, 1 } and Cluster { 2 } merged at distance 13.7931 into Cluster { 0, 1, 2 }"
    )


def test_format_merge_report_from_engine():
    engine = CentroidLinkage().fit([[0.0, 0.0], [0.0, 1.0], [10.0, 10.0]])
    lines = format_merge_report(engine.merges_).splitlines()

    assert lines == [
        "Cluster { 0 } and Cluster { 1 } merged at distance 1.0000 into Cluster { 0, 1 }",
        "Cluster { 0, 1 } and Cluster { 2 } merged at distance 13.7931 into Cluster { 0, 1, 2 }",
    ]


def test_format_merge_report_empty():
    assert format_merge_report([]) == ""


def test_format_vector_and_matrix():
    assert format_vector(torch.tensor([1.0, 2.5])) == "1.0000\t2.5000"
    assert format_matrix(torch.tensor([[1.0, 2.0], [3.0, 4.456]])) == "1.00 2.00\n3.00 4.46"


def test_format_distance_matrix():
    D = torch.tensor([[0.0, 5.0], [5.0, 0.0]])
    assert format_distance_matrix(D) == "0.0000\t5.0000\n5.0000\t0.0000"
