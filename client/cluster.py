"""Sets up a simulated cluster: one name node, N data nodes and a client."""

import shutil
from pathlib import Path
from typing import List, Optional

from common.constants import (
    CHUNK_SIZE_BYTES,
    CORRUPTION_MARKER,
    DATA_NODE_NAME_PREFIX,
    DEFAULT_NUM_DATA_NODES,
    DEFAULT_STORAGE_ROOT,
)
from common.exceptions import StorageIOError
from common.logging_config import get_logger
from client.dfs_client import DFSClient
from datanode.block_storage import BlockStore
from namenode.metadata_registry import MetadataRegistry

logger = get_logger(__name__)


class DFSCluster:
    """
    Owns the registry, the data nodes and the client built on top of them.

    Membership is fixed once initialize() has run.
    """

    def __init__(
        self,
        storage_root: Path = Path(DEFAULT_STORAGE_ROOT),
        num_data_nodes: int = DEFAULT_NUM_DATA_NODES,
        chunk_size: int = CHUNK_SIZE_BYTES,
        verify_checksums: bool = True,
        use_recorded_placement: bool = True,
        clean_on_start: bool = True,
        registry_path: Optional[Path] = None,
    ):
        if num_data_nodes <= 0:
            raise ValueError(f"num_data_nodes must be positive, got {num_data_nodes}")
        self.storage_root = Path(storage_root)
        self.num_data_nodes = num_data_nodes
        self.chunk_size = chunk_size
        self.verify_checksums = verify_checksums
        self.use_recorded_placement = use_recorded_placement
        self.clean_on_start = clean_on_start
        self.registry_path = Path(registry_path) if registry_path else None

        self.registry: Optional[MetadataRegistry] = None
        self.data_nodes: List[BlockStore] = []
        self.client: Optional[DFSClient] = None

    @classmethod
    def from_config(cls, config) -> "DFSCluster":
        """Build a cluster from a cli.config.Config instance."""
        return cls(**config.get_cluster_settings())

    def initialize(self) -> None:
        """
        Bootstrap storage and wire up the cluster.

        Raises:
            StorageIOError: If a data node directory cannot be prepared
        """
        logger.info("Starting TinyDFS Cluster...")

        if self.clean_on_start:
            self._remove_old_storage()

        self.registry = MetadataRegistry(snapshot_path=self.registry_path)
        if self.registry_path is not None:
            self.registry.load_from_disk(self.registry_path)

        self.data_nodes = []
        for i in range(self.num_data_nodes):
            node = BlockStore(f"{DATA_NODE_NAME_PREFIX}{i + 1}", self.storage_root)
            node.initialize()
            self.data_nodes.append(node)

        self.client = DFSClient(
            self.registry,
            self.data_nodes,
            chunk_size=self.chunk_size,
            verify_checksums=self.verify_checksums,
            use_recorded_placement=self.use_recorded_placement,
        )
        logger.info(f"Cluster Online: {len(self.data_nodes)} DataNodes active.")

    def _remove_old_storage(self) -> None:
        # A snapshot that outlives its blocks would point at deleted data.
        try:
            if self.registry_path is not None and self.registry_path.exists():
                self.registry_path.unlink()
            if self.storage_root.exists():
                shutil.rmtree(self.storage_root)
        except OSError as e:
            raise StorageIOError(f"Cannot clean storage root {self.storage_root}: {e}") from e
        logger.info(f"Removed previous storage at {self.storage_root}")

    def simulate_corruption(self, filename: str) -> Optional[str]:
        """
        Overwrite the first block of filename with CORRUPTION_MARKER.

        Assumes the first block lives on the first data node, which holds for
        round-robin placement.

        Returns:
            The corrupted block ID, or None if the file has no blocks

        Raises:
            FileNotFoundError: If filename is not registered
        """
        blocks = self.registry.get_file_blocks(filename)
        if not blocks:
            logger.info(f"File {filename} has no blocks, nothing to corrupt")
            return None

        block_id = blocks[0]
        self.data_nodes[0].put(block_id, CORRUPTION_MARKER)
        logger.warning(f"!!! SIMULATED CORRUPTION on Block {block_id} !!!")
        return block_id
