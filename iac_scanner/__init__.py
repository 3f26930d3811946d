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
IaC Scanner - Security checks for parsed infrastructure configuration.
"""

from ._version import __version__


def __getattr__(name: str):
    """Lazy-load public API symbols on first access.

    Importing :mod:`iac_scanner` alone does not import the check modules;
    they are loaded when the registry is first built.
    """
    _lazy_map = {
        "Config": (".config.config", "Config"),
        "IacScannerConstants": (".config.constants", "IacScannerConstants"),
        "Attribute": (".core.models", "Attribute"),
        "Block": (".core.models", "Block"),
        "Finding": (".core.models", "Finding"),
        "Provider": (".core.models", "Provider"),
        "Range": (".core.models", "Range"),
        "ScanResult": (".core.models", "ScanResult"),
        "Severity": (".core.models", "Severity"),
        "Check": (".core.check", "Check"),
        "CheckDocumentation": (".core.check", "CheckDocumentation"),
        "CheckRegistry": (".core.check_registry", "CheckRegistry"),
        "CheckLoader": (".core.check_registry", "CheckLoader"),
        "default_registry": (".core.check_registry", "default_registry"),
        "Context": (".core.context", "Context"),
        "is_boolean_or_string_true": (".core.coercion", "is_boolean_or_string_true"),
        "require_true_attribute": (".core.evaluation", "require_true_attribute"),
        "ScanPolicy": (".core.scan_policy", "ScanPolicy"),
        "Scanner": (".core.scanner", "Scanner"),
        "scan_blocks": (".core.scanner", "scan_blocks"),
    }
    if name in _lazy_map:
        module_path, attr = _lazy_map[name]
        import importlib

        mod = importlib.import_module(module_path, __package__)
        val = getattr(mod, attr)
        # Cache on the module so __getattr__ is only called once per symbol
        globals()[name] = val
        return val
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "__version__",
    "Scanner",
    "scan_blocks",
    "Block",
    "Attribute",
    "Range",
    "Finding",
    "ScanResult",
    "Severity",
    "Provider",
    "Check",
    "CheckDocumentation",
    "CheckRegistry",
    "CheckLoader",
    "default_registry",
    "Context",
    "is_boolean_or_string_true",
    "require_true_attribute",
    "ScanPolicy",
    "Config",
    "IacScannerConstants",
]
