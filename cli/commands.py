"""Command handler functions for console operations."""

from client.cluster import DFSCluster
from cli.models import (
    CorruptCommand,
    GetCommand,
    ListCommand,
    PutCommand,
)
from common.logging_config import get_logger

logger = get_logger(__name__)


def handle_put(cmd: PutCommand, cluster: DFSCluster) -> str:
    """
    Handle 'put' command.

    Args:
        cmd: PutCommand with content and filename
        cluster: Running cluster

    Returns:
        Success message with the number of stored blocks
    """
    logger.info(f"Executing put command: filename={cmd.filename}")
    data = cmd.content.encode('utf-8')
    blocks = cluster.client.write_file(cmd.filename, data)
    return f"Stored {cmd.filename} ({len(data)} bytes, {len(blocks)} block(s))"


def handle_get(cmd: GetCommand, cluster: DFSCluster) -> str:
    """
    Handle 'get' command.

    Args:
        cmd: GetCommand with filename
        cluster: Running cluster

    Returns:
        The file content decoded as UTF-8
    """
    logger.info(f"Executing get command: filename={cmd.filename}")
    data = cluster.client.read_file(cmd.filename)
    return f"Content: {data.decode('utf-8', errors='replace')}"


def handle_list(cmd: ListCommand, cluster: DFSCluster) -> str:
    """
    Handle 'list' command.

    Args:
        cmd: ListCommand
        cluster: Running cluster

    Returns:
        Formatted list of files with their block counts
    """
    files = cluster.registry.list_files()
    lines = ["--- Stored Files ---"]
    if not files:
        lines.append("(empty)")
    for summary in sorted(files, key=lambda s: s.filename):
        lines.append(f"File: {summary.filename} | Blocks: {summary.block_count}")
    return "\n".join(lines)


def handle_corrupt(cmd: CorruptCommand, cluster: DFSCluster) -> str:
    """
    Handle 'corrupt' command.

    Args:
        cmd: CorruptCommand with filename
        cluster: Running cluster

    Returns:
        Description of the injected fault
    """
    block_id = cluster.simulate_corruption(cmd.filename)
    if block_id is None:
        return f"{cmd.filename} has no blocks to corrupt"
    return (
        f"!!! SIMULATED CORRUPTION on Block {block_id} !!!\n"
        f"Run 'get {cmd.filename}' to see the damaged content."
    )
