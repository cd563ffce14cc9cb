"""Client library: chunking, checksums, placement and reassembly."""

import uuid
from typing import Iterator, List, Sequence, Tuple

from common.checksum import compute_checksum
from common.constants import CHUNK_SIZE_BYTES
from common.exceptions import BlockNotFoundError, ChecksumMismatchError
from common.logging_config import get_logger
from common.types import BlockDescriptor
from datanode.block_storage import BlockStore
from namenode.block_placement import node_for
from namenode.metadata_registry import MetadataRegistry

logger = get_logger(__name__)


def generate_block_id() -> str:
    """
    Generate a new block ID (UUID4 string).

    Returns:
        UUID4 string
    """
    return str(uuid.uuid4())


def split_into_chunks(data: bytes, chunk_size: int = CHUNK_SIZE_BYTES) -> Iterator[bytes]:
    """
    Yield consecutive slices of data, each chunk_size bytes except possibly the last.

    Empty data yields nothing.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    for offset in range(0, len(data), chunk_size):
        yield data[offset:offset + chunk_size]


class DFSClient:
    """
    The client library applications use to talk to the DFS.

    Writes split data into blocks, place them round-robin across the data
    nodes and register the block sequence with the name node once every block
    is stored. Reads fetch blocks in order and concatenate them.

    Args:
        registry: Name node shared by all clients of the cluster
        data_nodes: Fixed, ordered cluster membership
        chunk_size: Maximum block size in bytes
        verify_checksums: Compare each fetched block with the checksum
            recorded at write time and raise ChecksumMismatchError on mismatch.
            When False, corrupted bytes are returned as-is.
        use_recorded_placement: Read each block from the node recorded at
            write time. When False, the node is re-derived from the block's
            position and the current cluster size.
    """

    def __init__(
        self,
        registry: MetadataRegistry,
        data_nodes: Sequence[BlockStore],
        chunk_size: int = CHUNK_SIZE_BYTES,
        verify_checksums: bool = True,
        use_recorded_placement: bool = True,
    ):
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.registry = registry
        self.data_nodes = list(data_nodes)
        self.chunk_size = chunk_size
        self.verify_checksums = verify_checksums
        self.use_recorded_placement = use_recorded_placement

    @property
    def cluster_size(self) -> int:
        return len(self.data_nodes)

    def write_file(self, filename: str, data: bytes) -> List[BlockDescriptor]:
        """
        Store data under filename.

        Blocks already written are not rolled back if a later put fails; the
        failure propagates and the previous entry for filename stays in place.

        Returns:
            Descriptors of the stored blocks, in order

        Raises:
            StorageIOError: If a data node cannot store a block
        """
        logger.info(f"[Client] Starting upload: {filename} ({len(data)} bytes)")
        blocks: List[BlockDescriptor] = []

        for position, chunk in enumerate(split_into_chunks(data, self.chunk_size)):
            block_id = generate_block_id()
            checksum = compute_checksum(chunk)
            node_index = node_for(position, self.cluster_size)
            target = self.data_nodes[node_index]

            target.put(block_id, chunk)
            blocks.append(BlockDescriptor(
                block_id=block_id,
                block_index=position,
                size=len(chunk),
                checksum=checksum,
                node_index=node_index,
            ))
            logger.info(
                f"   > Stored Block {block_id[:8]} on {target.node_name} (Checksum: {checksum[:8]})"
            )

        self.registry.register_file(filename, blocks)
        logger.info(f"[Client] Upload complete: {filename} ({len(blocks)} blocks)")
        return blocks

    def read_file(self, filename: str) -> bytes:
        """
        Fetch and reassemble filename.

        Raises:
            FileNotFoundError: If filename is not registered
            BlockNotFoundError: If a block is missing from the node it is read from
            StorageIOError: If a data node cannot read a block
            ChecksumMismatchError: If verification is enabled and a block was altered
        """
        logger.info(f"[Client] Reading file: {filename}")
        entry = self.registry.get_file_entry(filename)
        parts: List[bytes] = []

        for position, block in enumerate(entry.blocks):
            source_index, source = self._locate(position, block)
            chunk = source.get(block.block_id)

            current_checksum = compute_checksum(chunk)
            if current_checksum != block.checksum:
                if self.verify_checksums:
                    logger.error(
                        f"   > Block {block.block_id[:8]} on {source.node_name} failed verification"
                    )
                    raise ChecksumMismatchError(block.block_id, block.checksum, current_checksum)
                logger.warning(
                    f"   > Block {block.block_id[:8]} on {source.node_name} checksum differs "
                    f"({current_checksum[:8]} != {block.checksum[:8]}), returning unverified data"
                )
            else:
                logger.debug(f"   > Verified block {block.block_id[:8]} from node {source_index}")

            parts.append(chunk)

        data = b"".join(parts)
        logger.info(f"[Client] Read {len(data)} bytes from {filename}")
        return data

    def locate_blocks(self, filename: str) -> List[Tuple[str, str]]:
        """
        Resolve each block of filename to the node the read path would use.

        Returns:
            (block_id, node_name) pairs in block order
        """
        entry = self.registry.get_file_entry(filename)
        return [
            (block.block_id, self._locate(position, block)[1].node_name)
            for position, block in enumerate(entry.blocks)
        ]

    def _locate(self, position: int, block: BlockDescriptor) -> Tuple[int, BlockStore]:
        if self.use_recorded_placement:
            node_index = block.node_index
            if node_index >= self.cluster_size:
                raise BlockNotFoundError(
                    f"Block {block.block_id} was placed on node index {node_index}, "
                    f"but the cluster has {self.cluster_size} nodes"
                )
        else:
            node_index = node_for(position, self.cluster_size)
        return node_index, self.data_nodes[node_index]
