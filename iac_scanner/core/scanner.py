# Copyright 2026 Cisco Systems, Inc.
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
Core scanner engine: matches registered checks against parsed blocks.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable

from .check import Check
from .check_registry import CheckRegistry, default_registry
from .context import Context
from .models import Block, Finding, ScanResult
from .scan_policy import ScanPolicy

logger = logging.getLogger(__name__)


class Scanner:
    """Runs every enabled check against every block it matches."""

    def __init__(
        self,
        registry: CheckRegistry | None = None,
        policy: ScanPolicy | None = None,
    ):
        """
        Initialize scanner.

        Args:
            registry: Checks to run. If None, uses the built-in registry.
            policy: Scan policy for exclusions and severity overrides.
                If None, loads built-in defaults.
        """
        self.registry = registry if registry is not None else default_registry()
        self.policy = policy or ScanPolicy.default()

    def enabled_checks(self) -> list[Check]:
        """Checks the policy allows, in registry order."""
        return [c for c in self.registry.all() if self.policy.is_check_enabled(c)]

    def scan(self, blocks: Iterable[Block], context: Context | None = None) -> ScanResult:
        """
        Scan a set of parsed blocks.

        Args:
            blocks: Blocks produced by the parser.
            context: Scan-wide context. If None, one is built over *blocks*.

        Returns:
            ScanResult with findings in block order, then registry order
        """
        start_time = time.time()
        blocks = tuple(blocks)
        if context is None:
            context = Context(blocks)

        checks = self.enabled_checks()
        enabled_codes = {c.code for c in checks}
        excluded = [code for code in self.registry.codes() if code not in enabled_codes]
        if excluded:
            logger.debug("Checks excluded by policy '%s': %s", self.policy.policy_name, ", ".join(excluded))

        findings: list[Finding] = []
        checks_run = 0
        for block in blocks:
            for check in checks:
                if not check.matches(block):
                    continue
                checks_run += 1
                for finding in check.run(block, context):
                    finding = self.policy.apply(finding)
                    if self.policy.meets_minimum(finding.severity):
                        findings.append(finding)

        result = ScanResult(
            findings=findings,
            blocks_scanned=len(blocks),
            checks_run=checks_run,
            excluded_checks=excluded,
            scan_duration_seconds=time.time() - start_time,
        )
        logger.info(
            "Scanned %d blocks with %d checks: %d findings",
            result.blocks_scanned,
            len(checks),
            len(result.findings),
        )
        return result


def scan_blocks(
    blocks: Iterable[Block],
    registry: CheckRegistry | None = None,
    policy: ScanPolicy | None = None,
) -> ScanResult:
    """
    Convenience function to scan blocks with a default scanner.

    Args:
        blocks: Blocks to scan
        registry: Optional check registry
        policy: Optional scan policy

    Returns:
        ScanResult
    """
    return Scanner(registry=registry, policy=policy).scan(blocks)
