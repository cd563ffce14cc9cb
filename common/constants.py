"""Project-wide constants (chunk size, cluster defaults, storage layout)."""

CHUNK_SIZE_BYTES: int = 64 * 1024  # 64 KiB default block size

DEFAULT_STORAGE_ROOT: str = "dfs_storage"
DEFAULT_NUM_DATA_NODES: int = 3
DATA_NODE_NAME_PREFIX: str = "node_"

BLOCK_FILE_SUFFIX: str = ".blk"

CORRUPTION_MARKER: bytes = b"CORRUPT_DATA"
