"""Command request data types for the console."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class PutCommand:
    """Store text content under a filename."""

    content: str
    filename: str
    command: Literal["put"] = "put"


@dataclass(frozen=True)
class GetCommand:
    """Read a file back."""

    filename: str
    command: Literal["get"] = "get"


@dataclass(frozen=True)
class ListCommand:
    """List registered files."""

    command: Literal["list"] = "list"


@dataclass(frozen=True)
class CorruptCommand:
    """Overwrite a file's first block to simulate bit rot."""

    filename: str
    command: Literal["corrupt"] = "corrupt"


CommandRequest = PutCommand | GetCommand | ListCommand | CorruptCommand
