"""Round-robin block placement shared by the write and read paths."""


def node_for(block_position: int, cluster_size: int) -> int:
    """
    Select the data node index for a block.

    Args:
        block_position: 0-based position of the block within its file
        cluster_size: Number of data nodes in the cluster

    Returns:
        Index into the cluster's data node list

    Raises:
        ValueError: If cluster_size is not positive or block_position is negative
    """
    if cluster_size <= 0:
        raise ValueError(f"cluster_size must be positive, got {cluster_size}")
    if block_position < 0:
        raise ValueError(f"block_position must be non-negative, got {block_position}")
    return block_position % cluster_size
