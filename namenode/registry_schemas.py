"""Pydantic schemas for the name node's on-disk registry snapshot."""

from typing import List

from pydantic import BaseModel, Field


class BlockRecord(BaseModel):
    """One block of a registered file."""
    block_id: str
    block_index: int = Field(ge=0)
    size: int = Field(ge=0)
    checksum: str
    node_index: int = Field(ge=0)


class FileRecord(BaseModel):
    """A filename and its ordered blocks."""
    filename: str
    blocks: List[BlockRecord]


class RegistrySnapshot(BaseModel):
    """Full registry contents as written by save_to_disk()."""
    version: int = 1
    files: List[FileRecord]
