"""Shared test fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_tree(tmp_path):
    """Create a small directory tree.

    tree/
        a.txt          4097 bytes -> 2 clusters
        sub/b.txt        10 bytes -> 1 cluster
    """
    root = tmp_path / "tree"
    root.mkdir()
    (root / "a.txt").write_bytes(b"a" * 4097)
    (root / "sub").mkdir()
    (root / "sub" / "b.txt").write_bytes(b"b" * 10)
    return root
