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
Data models for parsed configuration blocks and security findings.

``Range``, ``Attribute`` and ``Block`` are the read-only view handed over by
the parser.  ``Finding`` and ``ScanResult`` are what the scanner produces.
"""

from __future__ import annotations

import hashlib
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any


class Severity(str, Enum):
    """Severity levels for findings."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"

    @property
    def rank(self) -> int:
        """Numeric rank, higher is more severe."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {Severity.ERROR: 3, Severity.WARNING: 2, Severity.INFO: 1}


class Provider(str, Enum):
    """Cloud provider a check targets (informational, used for filtering)."""

    AWS = "aws"
    AZURE = "azure"
    GOOGLE = "google"
    DIGITALOCEAN = "digitalocean"
    KUBERNETES = "kubernetes"
    GENERAL = "general"


@dataclass(frozen=True)
class Range:
    """Source location of a block or attribute."""

    filename: str
    start_line: int
    end_line: int

    def __str__(self) -> str:
        if self.start_line == self.end_line:
            return f"{self.filename}:{self.start_line}"
        return f"{self.filename}:{self.start_line}-{self.end_line}"

    def to_dict(self) -> dict[str, Any]:
        return {"filename": self.filename, "start_line": self.start_line, "end_line": self.end_line}


@dataclass(frozen=True)
class Attribute:
    """A named value inside a block.

    ``value`` is the raw literal produced by the parser: a native ``bool``,
    a ``str``, a number, a list, a dict, or ``None``.
    """

    name: str
    value: Any
    range: Range

    def __hash__(self) -> int:
        # value may be an unhashable list or map
        return hash((self.name, self.range))


@dataclass(frozen=True)
class Block:
    """A parsed declaration such as ``resource "aws_s3_bucket" "logs" { ... }``.

    Labels are stored as a tuple and attributes behind a read-only mapping so
    checks cannot alter what the parser produced.
    """

    kind: str
    labels: tuple[str, ...]
    range: Range
    attributes: Mapping[str, Attribute] = field(default_factory=dict)
    module: str | None = None

    def __post_init__(self):
        """Freeze labels and attributes."""
        object.__setattr__(self, "labels", tuple(self.labels))
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @classmethod
    def from_attributes(
        cls,
        kind: str,
        labels: list[str] | tuple[str, ...],
        block_range: Range,
        attributes: list[Attribute],
        module: str | None = None,
    ) -> Block:
        """Build a block from a list of attributes, keyed by attribute name."""
        return cls(
            kind=kind,
            labels=tuple(labels),
            range=block_range,
            attributes={attr.name: attr for attr in attributes},
            module=module,
        )

    @property
    def type_label(self) -> str | None:
        """First label (the resource type for ``resource`` blocks), if any."""
        return self.labels[0] if self.labels else None

    def get_attribute(self, name: str) -> Attribute | None:
        """Look up an attribute by name."""
        return self.attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def full_name(self) -> str:
        """Display name, e.g. ``aws_s3_bucket.logs`` or ``module.net.aws_vpc.main``."""
        name = ".".join(self.labels) if self.labels else self.kind
        if self.module:
            return f"module.{self.module}.{name}"
        return name

    def __str__(self) -> str:
        return self.full_name()

    def __hash__(self) -> int:
        return hash((self.kind, self.labels, self.range, self.module))


def generate_finding_id(rule_id: str, context: str) -> str:
    """Generate a deterministic finding ID from the rule and its location."""
    combined = f"{rule_id}:{context}"
    hash_obj = hashlib.sha256(combined.encode())
    return f"{rule_id}_{hash_obj.hexdigest()[:10]}"


@dataclass(frozen=True)
class Finding:
    """A security issue reported by a check against a block."""

    rule_id: str
    rule_summary: str
    provider: Provider
    message: str
    range: Range
    severity: Severity
    links: tuple[str, ...] = ()
    attribute: Attribute | None = None  # Offending attribute, for annotated rendering
    range_annotation: str | None = None

    def __hash__(self) -> int:
        return hash((self.rule_id, self.range, self.message, self.severity))

    @property
    def id(self) -> str:
        return generate_finding_id(self.rule_id, f"{self.range}:{self.message}")

    def with_severity(self, severity: Severity) -> Finding:
        """Return a copy of this finding re-graded to *severity*."""
        return Finding(
            rule_id=self.rule_id,
            rule_summary=self.rule_summary,
            provider=self.provider,
            message=self.message,
            range=self.range,
            severity=severity,
            links=self.links,
            attribute=self.attribute,
            range_annotation=self.range_annotation,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert finding to dictionary."""
        return {
            "id": self.id,
            "rule_id": self.rule_id,
            "rule_summary": self.rule_summary,
            "provider": self.provider.value,
            "message": self.message,
            "severity": self.severity.value,
            "location": self.range.to_dict(),
            "attribute": self.attribute.name if self.attribute else None,
            "range_annotation": self.range_annotation,
            "links": list(self.links),
        }


@dataclass
class ScanResult:
    """Results from scanning a set of blocks."""

    findings: list[Finding] = field(default_factory=list)
    blocks_scanned: int = 0
    checks_run: int = 0
    excluded_checks: list[str] = field(default_factory=list)
    scan_duration_seconds: float = 0.0
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def has_errors(self) -> bool:
        """True if any finding is of ERROR severity."""
        return any(f.severity == Severity.ERROR for f in self.findings)

    @property
    def max_severity(self) -> Severity | None:
        """Highest severity found, or ``None`` when there are no findings."""
        if not self.findings:
            return None
        return max((f.severity for f in self.findings), key=lambda s: s.rank)

    def get_findings_by_severity(self, severity: Severity) -> list[Finding]:
        return [f for f in self.findings if f.severity == severity]

    def get_findings_by_rule(self, rule_id: str) -> list[Finding]:
        return [f for f in self.findings if f.rule_id == rule_id]

    def to_dict(self) -> dict[str, Any]:
        """Convert scan result to dictionary."""
        return {
            "findings_count": len(self.findings),
            "findings": [f.to_dict() for f in self.findings],
            "blocks_scanned": self.blocks_scanned,
            "checks_run": self.checks_run,
            "excluded_checks": list(self.excluded_checks),
            "scan_duration_seconds": self.scan_duration_seconds,
            "duration_ms": int(self.scan_duration_seconds * 1000),
            "timestamp": self.timestamp.isoformat(),
        }
