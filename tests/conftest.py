# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest before running tests.
All fixtures defined here are available to every test module without
explicit imports.
"""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Any

import pytest

from iac_scanner.core.check import Check, CheckDocumentation
from iac_scanner.core.check_registry import CheckRegistry
from iac_scanner.core.context import Context
from iac_scanner.core.evaluation import require_true_attribute
from iac_scanner.core.models import Attribute, Block, Provider, Range
from iac_scanner.core.scan_policy import ScanPolicy

# ---------------------------------------------------------------------------
# Block factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_block():
    """Factory fixture for creating synthetic :class:`Block` objects.

    Usage::

        block = make_block(
            "aws_elasticache_replication_group",
            "bad_example",
            at_rest_encryption_enabled=False,
        )

    Each attribute gets its own line inside the block's range so tests can
    tell block-level and attribute-level findings apart.
    """

    def _make(
        *labels: str,
        kind: str = "resource",
        filename: str = "main.tf",
        start_line: int = 1,
        module: str | None = None,
        **attributes: Any,
    ) -> Block:
        attrs = [
            Attribute(name=name, value=value, range=Range(filename, start_line + i + 1, start_line + i + 1))
            for i, (name, value) in enumerate(attributes.items())
        ]
        end_line = start_line + len(attrs) + 1
        return Block.from_attributes(kind, list(labels), Range(filename, start_line, end_line), attrs, module=module)

    return _make


@pytest.fixture
def empty_context() -> Context:
    return Context()


# ---------------------------------------------------------------------------
# Check fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def documentation() -> CheckDocumentation:
    """A fully populated documentation record."""
    return CheckDocumentation(
        summary="Widget is not hardened.",
        impact="Widgets could be abused",
        resolution="Harden the widget",
        explanation="Widgets should always be hardened.",
        bad_example='resource "widget" "bad" {\n  hardened = false\n}',
        good_example='resource "widget" "good" {\n  hardened = true\n}',
        links=("https://example.com/widgets",),
    )


@pytest.fixture
def make_check(documentation: CheckDocumentation):
    """Factory fixture for :class:`Check` objects with sensible defaults."""

    def _make(
        code: str = "TEST001",
        required_types=("resource",),
        required_labels=("widget",),
        check_func=None,
        provider: Provider = Provider.GENERAL,
    ) -> Check:
        return Check(
            code=code,
            documentation=documentation,
            provider=provider,
            required_types=frozenset(required_types),
            required_labels=frozenset(required_labels),
            check_func=check_func or require_true_attribute("hardened", "an unhardened widget"),
        )

    return _make


@pytest.fixture
def widget_registry(make_check) -> CheckRegistry:
    """Frozen registry with a single widget check."""
    registry = CheckRegistry()
    registry.register(make_check())
    return registry.freeze()


# ---------------------------------------------------------------------------
# Policy fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_policy(tmp_path: Path):
    """Factory fixture for creating :class:`ScanPolicy` from a YAML string.

    Usage::

        policy = make_policy('''
            policy_name: test
            excluded_checks:
              - AWS001
        ''')
    """
    _counter = [0]

    def _make(yaml_str: str) -> ScanPolicy:
        _counter[0] += 1
        p = tmp_path / f"policy-{_counter[0]}.yaml"
        p.write_text(textwrap.dedent(yaml_str))
        return ScanPolicy.from_yaml(p)

    return _make
