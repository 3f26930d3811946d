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
Check definitions: identity, documentation, match predicate and evaluation.

A :class:`Check` is an immutable record holding a plain function.  New rule
shapes are added by writing a new function with the
``(check, block, context) -> list[Finding]`` signature, never by subclassing.

.. code-block:: python

    AWS035 = Check(
        code="AWS035",
        documentation=CheckDocumentation(...),
        provider=Provider.AWS,
        required_types={"resource"},
        required_labels={"aws_elasticache_replication_group"},
        check_func=require_true_attribute("at_rest_encryption_enabled", "..."),
    )
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Any

from .evaluation import render_value
from .exceptions import CheckDefinitionError
from .models import Attribute, Block, Finding, Provider, Range, Severity

if TYPE_CHECKING:
    from .context import Context

CheckFunc = Callable[["Check", Block, "Context"], "list[Finding] | None"]


@dataclass(frozen=True)
class CheckDocumentation:
    """Human-facing documentation for a check.

    Used by catalog and reporting tooling only; evaluation never reads it.
    """

    summary: str
    impact: str
    resolution: str
    explanation: str
    bad_example: str
    good_example: str
    links: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "links", tuple(self.links))

    def missing_fields(self) -> list[str]:
        """Return the names of documentation fields that are empty."""
        missing = []
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "links":
                if not value or not all(str(link).strip() for link in value):
                    missing.append(f.name)
            elif not str(value).strip():
                missing.append(f.name)
        return missing

    def is_complete(self) -> bool:
        return not self.missing_fields()

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": self.summary,
            "impact": self.impact,
            "resolution": self.resolution,
            "explanation": self.explanation.strip(),
            "bad_example": self.bad_example.strip(),
            "good_example": self.good_example.strip(),
            "links": list(self.links),
        }


@dataclass(frozen=True)
class Check:
    """A registered security rule.

    Attributes:
        code: Globally unique identifier, e.g. ``AWS035``.
        documentation: Catalog metadata, see :class:`CheckDocumentation`.
        provider: Provider tag used for filtering.
        required_types: Block kinds the check applies to.  Empty means any.
        required_labels: First labels the check applies to.  Empty means any.
        check_func: The evaluation function.
    """

    code: str
    documentation: CheckDocumentation
    provider: Provider
    check_func: CheckFunc
    required_types: frozenset[str] = field(default_factory=frozenset)
    required_labels: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if not self.code or not self.code.strip():
            raise CheckDefinitionError("Check code must be a non-empty string")
        if not callable(self.check_func):
            raise CheckDefinitionError(f"Check '{self.code}' has a non-callable check_func")
        object.__setattr__(self, "required_types", _to_frozenset(self.required_types))
        object.__setattr__(self, "required_labels", _to_frozenset(self.required_labels))

    # -- Match predicate ----------------------------------------------------

    def matches(self, block: Block) -> bool:
        """Return True if this check applies to *block*.

        The block kind must be in ``required_types`` and the block's first
        label in ``required_labels``; an empty set places no constraint on
        that axis.  A block without labels never satisfies a label
        constraint.
        """
        if self.required_types and block.kind not in self.required_types:
            return False
        if self.required_labels:
            type_label = block.type_label
            if type_label is None or type_label not in self.required_labels:
                return False
        return True

    # -- Evaluation ---------------------------------------------------------

    def run(self, block: Block, context: Context) -> list[Finding]:
        """Evaluate the check against *block*.

        Returns an empty list without calling ``check_func`` when the block
        does not match.
        """
        if not self.matches(block):
            return []
        return list(self.check_func(self, block, context) or [])

    # -- Result constructors ------------------------------------------------

    def new_result(self, message: str, result_range: Range, severity: Severity) -> Finding:
        """Create a finding located at *result_range*."""
        return Finding(
            rule_id=self.code,
            rule_summary=self.documentation.summary,
            provider=self.provider,
            message=message,
            range=result_range,
            severity=severity,
            links=self.documentation.links,
        )

    def new_result_with_value_annotation(
        self,
        message: str,
        result_range: Range,
        attribute: Attribute,
        severity: Severity,
    ) -> Finding:
        """Create a finding that points at the offending *attribute*."""
        return Finding(
            rule_id=self.code,
            rule_summary=self.documentation.summary,
            provider=self.provider,
            message=message,
            range=result_range,
            severity=severity,
            links=self.documentation.links,
            attribute=attribute,
            range_annotation=render_value(attribute.value),
        )

    def __str__(self) -> str:
        return f"{self.code}: {self.documentation.summary}"


def _to_frozenset(values: Iterable[str] | str | None) -> frozenset[str]:
    if values is None:
        return frozenset()
    if isinstance(values, str):
        return frozenset({values})
    return frozenset(values)
