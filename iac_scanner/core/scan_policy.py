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
Scan policy: which checks run, for which providers, and at what severity.

Usage
-----
    from iac_scanner.core.scan_policy import ScanPolicy

    # Load built-in defaults
    policy = ScanPolicy.default()

    # Load an org policy (merges on top of defaults)
    policy = ScanPolicy.from_yaml("my_policy.yaml")

    # Dump the current (including default) policy for editing
    policy.to_yaml("generated_policy.yaml")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from ..config.constants import IacScannerConstants
from .exceptions import PolicyLoadError
from .models import Finding, Provider, Severity

if TYPE_CHECKING:
    from .check import Check

logger = logging.getLogger(__name__)

_DEFAULT_POLICY_PATH = IacScannerConstants.DEFAULT_POLICY_PATH


@dataclass
class SeverityOverride:
    """A per-check severity override."""

    rule_id: str
    severity: Severity
    reason: str = ""


@dataclass
class ScanPolicy:
    """Organisational scan policy."""

    policy_name: str = "default"
    policy_version: str = "1.0"
    excluded_checks: set[str] = field(default_factory=set)
    include_providers: set[Provider] = field(default_factory=set)
    minimum_severity: Severity = Severity.INFO
    severity_overrides: list[SeverityOverride] = field(default_factory=list)

    # -----------------------------------------------------------------------
    # Convenience helpers
    # -----------------------------------------------------------------------

    def is_check_enabled(self, check: Check) -> bool:
        """Return True unless *check* is excluded by code or provider."""
        if check.code in self.excluded_checks:
            return False
        if self.include_providers and check.provider not in self.include_providers:
            return False
        return True

    def get_severity_override(self, rule_id: str) -> Severity | None:
        """Return the overridden severity for *rule_id*, or ``None``."""
        for ovr in self.severity_overrides:
            if ovr.rule_id == rule_id:
                return ovr.severity
        return None

    def apply(self, finding: Finding) -> Finding:
        """Return *finding*, re-graded if a severity override exists."""
        override = self.get_severity_override(finding.rule_id)
        if override is None or override == finding.severity:
            return finding
        return finding.with_severity(override)

    def meets_minimum(self, severity: Severity) -> bool:
        return severity.rank >= self.minimum_severity.rank

    # -----------------------------------------------------------------------
    # Construction helpers
    # -----------------------------------------------------------------------

    @classmethod
    def default(cls) -> ScanPolicy:
        """Load the built-in default policy that ships with the package."""
        return cls.from_yaml(_DEFAULT_POLICY_PATH)

    @classmethod
    def from_yaml(cls, path: str | Path) -> ScanPolicy:
        """
        Load a policy from a YAML file.

        The YAML is merged on top of the built-in defaults so that users only
        need to specify the keys they want to override.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Policy file not found: {path}")

        raw = cls._read_yaml(path)

        if path.resolve() == _DEFAULT_POLICY_PATH.resolve():
            return cls.from_dict(raw)
        merged = cls._deep_merge(cls._load_default_raw(), raw)
        return cls.from_dict(merged)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> ScanPolicy:
        """Build a policy from already-parsed YAML data.

        Raises:
            PolicyLoadError: If a list-valued key holds a mapping, or a
                severity override entry is not a mapping.
        """
        severity_overrides: list[SeverityOverride] = []
        for ovr in _as_list(d, "severity_overrides"):
            if not isinstance(ovr, dict):
                raise PolicyLoadError(f"Severity override must be a mapping with rule_id and severity, got {ovr!r}")
            severity = _parse_severity(ovr.get("severity"))
            if severity is None or not ovr.get("rule_id"):
                logger.warning("Ignoring invalid severity override: %r", ovr)
                continue
            severity_overrides.append(
                SeverityOverride(rule_id=str(ovr["rule_id"]), severity=severity, reason=ovr.get("reason", ""))
            )

        providers: set[Provider] = set()
        for name in _as_list(d, "include_providers"):
            try:
                providers.add(Provider(str(name).lower()))
            except ValueError:
                logger.warning("Ignoring unknown provider in policy: %s", name)

        minimum = _parse_severity(d.get("minimum_severity", "INFO"))
        if minimum is None:
            raise PolicyLoadError(f"Invalid minimum_severity: {d.get('minimum_severity')!r}")

        return cls(
            policy_name=str(d.get("policy_name", "default")),
            policy_version=str(d.get("policy_version", "1.0")),
            excluded_checks={str(code) for code in _as_list(d, "excluded_checks")},
            include_providers=providers,
            minimum_severity=minimum,
            severity_overrides=severity_overrides,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "policy_name": self.policy_name,
            "policy_version": self.policy_version,
            "excluded_checks": sorted(self.excluded_checks),
            "include_providers": sorted(p.value for p in self.include_providers),
            "minimum_severity": self.minimum_severity.value,
            "severity_overrides": [
                {"rule_id": o.rule_id, "severity": o.severity.value, "reason": o.reason}
                for o in self.severity_overrides
            ],
        }

    def to_yaml(self, path: str | Path) -> None:
        """Dump the full policy to a YAML file for editing."""
        with open(path, "w") as fh:
            fh.write("# IaC Scanner – Scan Policy\n")
            fh.write("# Only include keys you want to override; omitted keys\n")
            fh.write("# will use the built-in defaults.\n\n")
            yaml.dump(self.to_dict(), fh, default_flow_style=False, sort_keys=False, width=120)

    # -----------------------------------------------------------------------
    # Internal parsing
    # -----------------------------------------------------------------------

    @staticmethod
    def _read_yaml(path: Path) -> dict[str, Any]:
        try:
            with open(path) as fh:
                raw = yaml.safe_load(fh) or {}
        except yaml.YAMLError as e:
            raise PolicyLoadError(f"Malformed policy file {path}: {e}") from e
        if not isinstance(raw, dict):
            raise PolicyLoadError(f"Policy file {path} must contain a mapping at the top level")
        return raw

    @staticmethod
    def _deep_merge(base: dict, override: dict) -> dict:
        """Recursively merge *override* into *base*.

        Lists in the override **replace** the base list, so an org can narrow
        a list without repeating every entry.
        """
        result = dict(base)
        for key, val in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(val, dict):
                result[key] = ScanPolicy._deep_merge(result[key], val)
            else:
                result[key] = val
        return result

    @classmethod
    def _load_default_raw(cls) -> dict[str, Any]:
        if _DEFAULT_POLICY_PATH.exists():
            return cls._read_yaml(_DEFAULT_POLICY_PATH)
        return {}


def _parse_severity(value: Any) -> Severity | None:
    if isinstance(value, Severity):
        return value
    try:
        return Severity(str(value).upper())
    except ValueError:
        return None


def _as_list(d: dict[str, Any], key: str) -> list[Any]:
    """Read a list-valued key; a lone scalar is treated as a one-item list."""
    value = d.get(key)
    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    if isinstance(value, dict):
        raise PolicyLoadError(f"Policy key '{key}' must be a list, got a mapping")
    return [value]
