"""Shared data type definitions (BlockDescriptor, FileEntry, FileSummary)."""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class BlockDescriptor:
    """
    Metadata for a single stored block, recorded at write time.
    """
    block_id: str
    block_index: int
    size: int
    checksum: str
    node_index: int


@dataclass(frozen=True)
class FileEntry:
    """
    A registered file: its name and its blocks in reassembly order.
    """
    filename: str
    blocks: Tuple[BlockDescriptor, ...]

    @property
    def block_ids(self) -> List[str]:
        return [block.block_id for block in self.blocks]

    @property
    def size(self) -> int:
        return sum(block.size for block in self.blocks)


@dataclass(frozen=True)
class FileSummary:
    """One row of a registry listing."""
    filename: str
    block_count: int
