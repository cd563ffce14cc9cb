"""Tests for round-robin block placement."""

import pytest

from namenode.block_placement import node_for


@pytest.mark.parametrize("cluster_size", [1, 2, 3, 5])
def test_node_for_is_position_mod_cluster_size(cluster_size):
    for position in range(20):
        assert node_for(position, cluster_size) == position % cluster_size


def test_node_for_round_robin_on_three_nodes():
    assert [node_for(i, 3) for i in range(7)] == [0, 1, 2, 0, 1, 2, 0]


def test_node_for_rejects_empty_cluster():
    with pytest.raises(ValueError):
        node_for(0, 0)


def test_node_for_rejects_negative_position():
    with pytest.raises(ValueError):
        node_for(-1, 3)
