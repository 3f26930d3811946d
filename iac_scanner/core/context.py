# Copyright 2026 Cisco Systems, Inc. and its affiliates
# SPDX-License-Identifier: Apache-2.0

"""Scan-wide, read-only view over the blocks of one scan."""

from __future__ import annotations

from collections.abc import Iterable

from .models import Block


class Context:
    """Blocks visible to checks during a scan.

    Checks that need cross-references (e.g. a bucket policy that points at a
    bucket) look up sibling blocks here.  The block sequence is copied into a
    tuple on construction and never changes afterwards.
    """

    def __init__(self, blocks: Iterable[Block] = ()):
        self._blocks: tuple[Block, ...] = tuple(blocks)

    @property
    def blocks(self) -> tuple[Block, ...]:
        return self._blocks

    def get_blocks_by_type(self, kind: str, label: str | None = None) -> list[Block]:
        """Return blocks of *kind*, optionally restricted to a first *label*."""
        return [b for b in self._blocks if b.kind == kind and (label is None or b.type_label == label)]

    def get_resources_by_type(self, label: str) -> list[Block]:
        return self.get_blocks_by_type("resource", label)

    def get_block_by_full_name(self, name: str) -> Block | None:
        for block in self._blocks:
            if block.full_name() == name:
                return block
        return None

    def __len__(self) -> int:
        return len(self._blocks)
