"""Shared pytest fixtures for all tests."""

import pytest
from cli.config import Config
from client.cluster import DFSCluster


@pytest.fixture
def storage_root(tmp_path):
    """
    Directory holding the data node namespaces for one test.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to a not-yet-created storage root
    """
    return tmp_path / 'dfs_storage'


@pytest.fixture
def cluster(storage_root):
    """
    Initialized three-node cluster with the default 64 KiB block size.

    Returns:
        DFSCluster instance
    """
    dfs = DFSCluster(storage_root=storage_root, num_data_nodes=3)
    dfs.initialize()
    return dfs


@pytest.fixture
def small_block_cluster(storage_root):
    """
    Initialized three-node cluster with 4-byte blocks so short payloads span several nodes.

    Returns:
        DFSCluster instance
    """
    dfs = DFSCluster(storage_root=storage_root, num_data_nodes=3, chunk_size=4)
    dfs.initialize()
    return dfs


@pytest.fixture
def unverified_cluster(storage_root):
    """
    Cluster whose client returns fetched blocks without comparing checksums.

    Returns:
        DFSCluster instance
    """
    dfs = DFSCluster(storage_root=storage_root, num_data_nodes=3, verify_checksums=False)
    dfs.initialize()
    return dfs


@pytest.fixture
def temp_config(tmp_path):
    """
    Create temporary config instance.

    Returns:
        Config instance with temp config file
    """
    config_dir = tmp_path / '.tinydfs'
    config_dir.mkdir()
    return Config(config_dir / 'config.json')
