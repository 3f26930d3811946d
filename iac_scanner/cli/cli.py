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

"""Command-line interface for browsing and auditing the check catalog."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from ..config.config import Config
from ..config.constants import IacScannerConstants
from ..core.check_registry import CheckRegistry, default_registry
from ..core.exceptions import PolicyLoadError
from ..core.models import Provider
from ..core.scan_policy import ScanPolicy

logger = logging.getLogger("iac_scanner.cli")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def list_checks_command(args: argparse.Namespace, registry: CheckRegistry) -> int:
    """Print every registered check, optionally filtered by provider."""
    checks = registry.for_provider(args.provider) if args.provider else registry.all()

    if args.format == "json":
        payload = [
            {"code": c.code, "provider": c.provider.value, "summary": c.documentation.summary} for c in checks
        ]
        print(json.dumps(payload, indent=2))
        return 0

    for check in checks:
        print(f"{check.code:<10} {check.provider.value:<12} {check.documentation.summary}")
    print(f"\n{len(checks)} check(s)")
    return 0


def describe_command(args: argparse.Namespace, registry: CheckRegistry) -> int:
    """Print the documentation record of one check."""
    check = registry.get(args.code.upper())
    if check is None:
        print(f"Error: Unknown check code: {args.code}", file=sys.stderr)
        return 1

    doc = check.documentation.to_dict()
    if args.format == "json":
        print(json.dumps({"code": check.code, "provider": check.provider.value, **doc}, indent=2))
        return 0

    print(f"{check.code} ({check.provider.value})")
    print(f"  Summary:     {doc['summary']}")
    print(f"  Impact:      {doc['impact']}")
    print(f"  Resolution:  {doc['resolution']}")
    print(f"\n{doc['explanation']}\n")
    print("Insecure example:\n")
    print(doc["bad_example"])
    print("\nSecure example:\n")
    print(doc["good_example"])
    print("\nLinks:")
    for link in doc["links"]:
        print(f"  - {link}")
    return 0


def validate_docs_command(args: argparse.Namespace, registry: CheckRegistry) -> int:
    """Exit non-zero if any check has incomplete documentation."""
    problems = registry.validate_documentation()
    if not problems:
        print(f"All {len(registry)} checks are fully documented.")
        return 0
    for code, missing in problems.items():
        print(f"{code}: missing {', '.join(missing)}", file=sys.stderr)
    return 1


def generate_policy_command(args: argparse.Namespace, registry: CheckRegistry) -> int:
    """Write the effective policy to a YAML file."""
    try:
        policy = Config.from_env().load_policy()
    except (FileNotFoundError, PolicyLoadError) as e:
        print(f"Error loading policy: {e}", file=sys.stderr)
        return 1
    unknown = sorted(code for code in policy.excluded_checks if code not in registry)
    if unknown:
        logger.warning("Policy excludes unknown check codes: %s", ", ".join(unknown))
    policy.to_yaml(args.output)
    print(f"Policy written to {args.output}")
    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="IaC Scanner - Security checks for infrastructure configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  iac-scanner list-checks
  iac-scanner list-checks --provider aws --format json
  iac-scanner describe AWS035
  iac-scanner validate-docs
  iac-scanner generate-policy -o my_policy.yaml
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {IacScannerConstants.VERSION}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # -- list-checks -------------------------------------------------------
    lc_p = subparsers.add_parser("list-checks", help="List registered checks")
    lc_p.add_argument("--provider", choices=[p.value for p in Provider], help="Only list checks for a provider")
    lc_p.add_argument("--format", choices=["text", "json"], default="text", help="Output format")

    # -- describe ----------------------------------------------------------
    d_p = subparsers.add_parser("describe", help="Show documentation for a check")
    d_p.add_argument("code", help="Check code, e.g. AWS035")
    d_p.add_argument("--format", choices=["text", "json"], default="text", help="Output format")

    # -- validate-docs -----------------------------------------------------
    subparsers.add_parser("validate-docs", help="Verify every check is fully documented")

    # -- generate-policy ---------------------------------------------------
    gp_p = subparsers.add_parser("generate-policy", help="Generate a scan policy YAML")
    gp_p.add_argument("--output", "-o", default="scan_policy.yaml", help="Output file path")

    # -- dispatch ----------------------------------------------------------
    args = parser.parse_args(argv)

    config = Config.from_env()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level_value,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    dispatch = {
        "list-checks": list_checks_command,
        "describe": describe_command,
        "validate-docs": validate_docs_command,
        "generate-policy": generate_policy_command,
    }
    handler = dispatch.get(args.command)
    if handler:
        return handler(args, default_registry())

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
