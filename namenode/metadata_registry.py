"""Name node registry: filename -> ordered block descriptors."""

import json
import threading
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from pydantic import ValidationError

from common.exceptions import FileNotFoundError, StorageIOError
from common.logging_config import get_logger
from common.types import BlockDescriptor, FileEntry, FileSummary
from namenode.registry_schemas import BlockRecord, FileRecord, RegistrySnapshot

logger = get_logger(__name__)


class MetadataRegistry:
    """
    Authoritative mapping from filename to its block sequence.

    Entries are immutable FileEntry objects swapped under a lock, so a lookup
    racing a re-registration sees either the old sequence or the new one in
    full. Last writer wins.
    """

    def __init__(self, snapshot_path: Optional[Path] = None):
        """
        Args:
            snapshot_path: If set, the registry is written to this JSON file
                after every registration
        """
        self._files: Dict[str, FileEntry] = {}
        self._lock = threading.RLock()
        self.snapshot_path = Path(snapshot_path) if snapshot_path else None

    def register_file(self, filename: str, blocks: Sequence[BlockDescriptor]) -> FileEntry:
        """
        Insert or replace the entry for filename.

        Args:
            filename: File identity
            blocks: Block descriptors in reassembly order

        Returns:
            The stored FileEntry
        """
        entry = FileEntry(filename=filename, blocks=tuple(blocks))
        with self._lock:
            replaced = filename in self._files
            files = dict(self._files)
            files[filename] = entry
            # Snapshot first: a failed save leaves the previous mapping in place.
            if self.snapshot_path is not None:
                self._write_snapshot(files, self.snapshot_path)
            self._files = files

        action = "Replaced" if replaced else "Registered"
        logger.info(f"[NameNode] {action} file metadata for: {filename} ({len(entry.blocks)} blocks)")
        return entry

    def get_file_entry(self, filename: str) -> FileEntry:
        """
        Look up the full entry (with checksums and node indexes) for filename.

        Raises:
            FileNotFoundError: If filename is not registered
        """
        with self._lock:
            entry = self._files.get(filename)
        if entry is None:
            raise FileNotFoundError(f"File not found in NameNode: {filename}")
        return entry

    def get_file_blocks(self, filename: str) -> List[str]:
        """
        Get the ordered block IDs of filename.

        Raises:
            FileNotFoundError: If filename is not registered
        """
        return self.get_file_entry(filename).block_ids

    def list_files(self) -> List[FileSummary]:
        """Snapshot of (filename, block count) pairs. Order is unspecified."""
        with self._lock:
            entries = list(self._files.values())
        return [FileSummary(filename=e.filename, block_count=len(e.blocks)) for e in entries]

    def file_exists(self, filename: str) -> bool:
        with self._lock:
            return filename in self._files

    def count(self) -> int:
        with self._lock:
            return len(self._files)

    def save_to_disk(self, path: Path) -> None:
        """
        Persist the registry to a JSON file.

        Raises:
            StorageIOError: If write operation fails
        """
        with self._lock:
            self._write_snapshot(self._files, path)

    def _write_snapshot(self, files: Dict[str, FileEntry], path: Path) -> None:
        snapshot = RegistrySnapshot(
            files=[
                FileRecord(
                    filename=entry.filename,
                    blocks=[
                        BlockRecord(
                            block_id=b.block_id,
                            block_index=b.block_index,
                            size=b.size,
                            checksum=b.checksum,
                            node_index=b.node_index,
                        )
                        for b in entry.blocks
                    ],
                )
                for entry in files.values()
            ]
        )

        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w') as f:
                f.write(snapshot.model_dump_json(indent=2))
        except OSError as e:
            raise StorageIOError(f"Failed to write registry snapshot {path}: {e}") from e

        logger.debug(f"Saved {len(snapshot.files)} file entries to {path}")

    def load_from_disk(self, path: Path) -> bool:
        """
        Replace the registry contents with a snapshot written by save_to_disk().

        Returns:
            True if loaded successfully, False if file doesn't exist

        Raises:
            ValueError: If the file is not valid JSON or does not match the schema
        """
        path = Path(path)
        if not path.exists():
            logger.warning(f"Registry snapshot not found at {path}")
            return False

        try:
            with open(path, 'r') as f:
                snapshot = RegistrySnapshot.model_validate(json.load(f))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Failed to parse registry snapshot {path}: {e}")
            raise ValueError(f"Invalid registry snapshot {path}: {e}") from e

        files = {
            record.filename: FileEntry(
                filename=record.filename,
                blocks=tuple(
                    BlockDescriptor(**block.model_dump())
                    for block in sorted(record.blocks, key=lambda b: b.block_index)
                ),
            )
            for record in snapshot.files
        }
        with self._lock:
            self._files = files

        logger.info(f"Loaded {len(files)} file entries from {path}")
        return True
