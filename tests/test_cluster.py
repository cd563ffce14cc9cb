"""Tests for cluster bootstrap and corruption injection."""

import pytest

from client.cluster import DFSCluster
from common.constants import CORRUPTION_MARKER
from common.exceptions import ChecksumMismatchError, FileNotFoundError, StorageIOError


class TestInitialize:

    def test_creates_named_data_nodes(self, cluster, storage_root):
        assert [node.node_name for node in cluster.data_nodes] == ["node_1", "node_2", "node_3"]
        for name in ("node_1", "node_2", "node_3"):
            assert (storage_root / name).is_dir()

    def test_client_shares_cluster_registry(self, cluster):
        assert cluster.client.registry is cluster.registry
        assert cluster.client.cluster_size == 3

    def test_clean_on_start_removes_previous_blocks(self, storage_root):
        stale = storage_root / "node_1" / "stale.blk"
        stale.parent.mkdir(parents=True)
        stale.write_bytes(b"old run")

        DFSCluster(storage_root=storage_root).initialize()

        assert not stale.exists()

    def test_keeps_previous_blocks_when_not_cleaning(self, storage_root):
        stale = storage_root / "node_1" / "stale.blk"
        stale.parent.mkdir(parents=True)
        stale.write_bytes(b"old run")

        DFSCluster(storage_root=storage_root, clean_on_start=False).initialize()

        assert stale.read_bytes() == b"old run"

    def test_unpreparable_node_raises(self, storage_root):
        storage_root.mkdir()
        (storage_root / "node_2").write_bytes(b"file in the way")

        dfs = DFSCluster(storage_root=storage_root, clean_on_start=False)
        with pytest.raises(StorageIOError):
            dfs.initialize()

    def test_rejects_empty_cluster(self, storage_root):
        with pytest.raises(ValueError):
            DFSCluster(storage_root=storage_root, num_data_nodes=0)

    def test_registry_snapshot_survives_restart(self, storage_root, tmp_path):
        registry_path = tmp_path / "registry.json"
        first = DFSCluster(storage_root=storage_root, registry_path=registry_path)
        first.initialize()
        first.client.write_file("a.txt", b"persisted")

        second = DFSCluster(
            storage_root=storage_root, registry_path=registry_path, clean_on_start=False
        )
        second.initialize()

        assert second.client.read_file("a.txt") == b"persisted"

    def test_clean_start_discards_registry_snapshot(self, storage_root, tmp_path):
        registry_path = tmp_path / "registry.json"
        first = DFSCluster(storage_root=storage_root, registry_path=registry_path)
        first.initialize()
        first.client.write_file("a.txt", b"gone")

        second = DFSCluster(storage_root=storage_root, registry_path=registry_path)
        second.initialize()

        assert second.registry.list_files() == []


class TestSimulateCorruption:

    def test_unverified_read_returns_marker(self, unverified_cluster):
        unverified_cluster.client.write_file("a.txt", b"hello")

        block_id = unverified_cluster.simulate_corruption("a.txt")

        assert block_id == unverified_cluster.registry.get_file_blocks("a.txt")[0]
        assert unverified_cluster.client.read_file("a.txt") == CORRUPTION_MARKER

    def test_only_first_block_is_replaced(self, storage_root):
        dfs = DFSCluster(storage_root=storage_root, chunk_size=4, verify_checksums=False)
        dfs.initialize()
        dfs.client.write_file("a.txt", b"abcdefgh")

        dfs.simulate_corruption("a.txt")

        assert dfs.client.read_file("a.txt") == CORRUPTION_MARKER + b"efgh"

    def test_verified_read_detects_corruption(self, cluster):
        cluster.client.write_file("a.txt", b"hello")
        cluster.simulate_corruption("a.txt")

        with pytest.raises(ChecksumMismatchError):
            cluster.client.read_file("a.txt")

    def test_empty_file_is_left_alone(self, cluster):
        cluster.client.write_file("empty.txt", b"")
        assert cluster.simulate_corruption("empty.txt") is None
        assert cluster.client.read_file("empty.txt") == b""

    def test_missing_file_raises(self, cluster):
        with pytest.raises(FileNotFoundError):
            cluster.simulate_corruption("nonexistent")


def test_from_config(temp_config, storage_root):
    temp_config.data['storage_root'] = str(storage_root)
    temp_config.data['num_data_nodes'] = 5
    temp_config.data['chunk_size'] = 8
    temp_config.data['verify_checksums'] = False

    dfs = DFSCluster.from_config(temp_config)
    dfs.initialize()

    assert len(dfs.data_nodes) == 5
    assert dfs.client.chunk_size == 8
    assert dfs.client.verify_checksums is False


def test_write_with_unwritable_registry_snapshot_is_not_registered(storage_root, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a regular file, not a directory")
    dfs = DFSCluster(storage_root=storage_root, registry_path=blocker / "registry.json")
    dfs.initialize()

    with pytest.raises(StorageIOError):
        dfs.client.write_file("a.txt", b"hello")

    assert not dfs.registry.file_exists("a.txt")
