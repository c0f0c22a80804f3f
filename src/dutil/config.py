"""Validated report configuration built from command-line switches."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from dutil.utils import DEFAULT_CLUSTER_SIZE, KIBI_CLUSTER_SIZE

_DIGITS = re.compile(r"[0-9]+")


class ConfigError(ValueError):
    """Raised when switches cannot be combined into a valid configuration."""


class SortMode(Enum):
    NONE = "none"
    NAME = "name"
    SIZE = "size"


class SizeMode(Enum):
    RAW = "raw"
    HUMAN = "human"
    BYTES = "bytes"


@dataclass(frozen=True, slots=True)
class ReportConfig:
    """How a disk usage report is computed and displayed."""

    cluster_size: int = DEFAULT_CLUSTER_SIZE
    sort_mode: SortMode = SortMode.NONE
    size_mode: SizeMode = SizeMode.RAW
    summary_only: bool = False
    reverse: bool = False

    def __post_init__(self) -> None:
        if self.cluster_size <= 0:
            raise ConfigError(f"cluster size must be positive, got {self.cluster_size}")

    @classmethod
    def from_switches(
        cls,
        *,
        human: bool = False,
        as_bytes: bool = False,
        summary: bool = False,
        kilo: bool = False,
        by_size: bool = False,
        by_name: bool = False,
        reverse: bool = False,
        block_size: str | None = None,
    ) -> ReportConfig:
        """Build a configuration from raw switch values.

        Mutually exclusive switches are rejected here, before any scan runs.

        Raises:
            ConfigError: On conflicting switches or a malformed block size.
        """
        if human and as_bytes:
            raise ConfigError("cannot use both -b and -h")
        if by_name and by_size:
            raise ConfigError("-n and -z switches are incompatible")
        if kilo and block_size is not None:
            raise ConfigError("-k and --block-size are incompatible")

        if block_size is not None:
            cluster_size = parse_block_size(block_size)
        elif kilo:
            cluster_size = KIBI_CLUSTER_SIZE
        else:
            cluster_size = DEFAULT_CLUSTER_SIZE

        if human:
            size_mode = SizeMode.HUMAN
        elif as_bytes:
            size_mode = SizeMode.BYTES
        else:
            size_mode = SizeMode.RAW

        if by_name:
            sort_mode = SortMode.NAME
        elif by_size:
            sort_mode = SortMode.SIZE
        else:
            sort_mode = SortMode.NONE

        return cls(
            cluster_size=cluster_size,
            sort_mode=sort_mode,
            size_mode=size_mode,
            summary_only=summary,
            reverse=reverse,
        )


def parse_block_size(text: str) -> int:
    """Parse a ``--block-size`` value; only plain positive integers are accepted."""
    if not _DIGITS.fullmatch(text) or int(text) == 0:
        raise ConfigError(f"block-size value is invalid: {text!r}")
    return int(text)
