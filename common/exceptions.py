"""Custom exception classes for TinyDFS."""


class DFSException(Exception):
    """
    Base exception class for all DFS-related errors.
    """
    pass


class FileNotFoundError(DFSException):
    """
    Raised when a filename is not registered in the name node.
    """
    pass


class BlockNotFoundError(DFSException):
    """
    Raised when a data node has no blob stored under the requested block ID.
    """
    pass


class StorageIOError(DFSException):
    """
    Raised when a data node's storage cannot complete a put, get or initialize.
    """
    pass


class ChecksumMismatchError(DFSException):
    """
    Raised when a fetched block does not match the checksum recorded at write time.
    """

    def __init__(self, block_id: str, expected: str, actual: str):
        super().__init__(
            f"Checksum mismatch for block {block_id}: "
            f"expected {expected[:8]}..., got {actual[:8]}..."
        )
        self.block_id = block_id
        self.expected = expected
        self.actual = actual
