"""Shared utility functions."""

from __future__ import annotations

DEFAULT_CLUSTER_SIZE = 4096
KIBI_CLUSTER_SIZE = 1024

# Human-readable sizes always assume the default cluster size.
HUMAN_CLUSTER_SIZE = 4096

_SUFFIXES = ("", "K", "M", "G", "T", "P", "E")


def ceiling_clusters(byte_size: int, cluster_size: int) -> int:
    """Return how many clusters of ``cluster_size`` bytes hold ``byte_size`` bytes.

    Partial clusters count as whole ones, so a 1-byte file costs one cluster.
    """
    return -(-byte_size // cluster_size)


def human_format(clusters: int) -> str:
    """Convert a cluster count to a short human-readable string.

    Values below 10 keep one truncated decimal digit (``9.9M``), larger
    values are rounded half-up to an integer (``11M``).
    """
    size = clusters * HUMAN_CLUSTER_SIZE
    index = 0
    unit = 1
    while size >= unit * 1024 and index < len(_SUFFIXES) - 1:
        index += 1
        unit *= 1024

    suffix = _SUFFIXES[index]
    if 0 < size < unit * 10:
        tenths = size * 10 // unit
        whole, fraction = divmod(tenths, 10)
        if fraction:
            return f"{whole}.{fraction}{suffix}"
        return f"{whole}{suffix}"
    return f"{(size * 2 + unit) // (unit * 2)}{suffix}"
