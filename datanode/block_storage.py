"""Manages one data node's block files on disk: put/get by block ID."""

from pathlib import Path
from typing import List

from common.constants import BLOCK_FILE_SUFFIX
from common.exceptions import BlockNotFoundError, StorageIOError
from common.logging_config import get_logger

logger = get_logger(__name__)


class BlockStore:
    """
    Byte-addressable blob store scoped to a single data node directory.

    The store performs no integrity checks; it returns exactly the bytes
    last written under a block ID.
    """

    def __init__(self, node_name: str, storage_root: Path):
        """
        Args:
            node_name: Stable name of the data node (e.g. 'node_1')
            storage_root: Directory holding one sub-directory per data node
        """
        self.node_name = node_name
        self.storage_path = Path(storage_root) / node_name

    def __repr__(self) -> str:
        return f"BlockStore({self.node_name!r}, {str(self.storage_path)!r})"

    def initialize(self) -> None:
        """
        Ensure the node's directory exists. Safe to call repeatedly.

        Raises:
            StorageIOError: If the directory cannot be created
        """
        try:
            self.storage_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageIOError(
                f"Cannot prepare storage for {self.node_name} at {self.storage_path}: {e}"
            ) from e

    def block_path(self, block_id: str) -> Path:
        """
        Get file path for a block.

        Args:
            block_id: UUID of the block

        Returns:
            Path object for block file
        """
        return self.storage_path / f"{block_id}{BLOCK_FILE_SUFFIX}"

    def put(self, block_id: str, data: bytes) -> None:
        """
        Write block data to disk, replacing any existing blob with the same ID.

        Args:
            block_id: UUID of the block
            data: Raw block bytes

        Raises:
            StorageIOError: If the write fails
        """
        self.initialize()
        try:
            self.block_path(block_id).write_bytes(data)
        except OSError as e:
            raise StorageIOError(
                f"Failed to write block {block_id} on {self.node_name}: {e}"
            ) from e
        logger.debug(f"[{self.node_name}] Saved block {block_id[:8]}... ({len(data)} bytes)")

    def get(self, block_id: str) -> bytes:
        """
        Read an entire block from disk.

        Args:
            block_id: UUID of the block

        Returns:
            Raw block data

        Raises:
            BlockNotFoundError: If no blob exists under block_id on this node
            StorageIOError: If the read fails
        """
        filepath = self.block_path(block_id)
        try:
            return filepath.read_bytes()
        except FileNotFoundError as e:
            raise BlockNotFoundError(f"Block {block_id} missing on {self.node_name}") from e
        except OSError as e:
            raise StorageIOError(
                f"Failed to read block {block_id} on {self.node_name}: {e}"
            ) from e

    def contains(self, block_id: str) -> bool:
        """Check if a blob exists under block_id on this node."""
        return self.block_path(block_id).is_file()

    def list_block_ids(self) -> List[str]:
        """
        List all block IDs stored on this node.

        Returns:
            List of block IDs (without file suffix)
        """
        if not self.storage_path.exists():
            return []
        return [path.stem for path in self.storage_path.glob(f"*{BLOCK_FILE_SUFFIX}")]
