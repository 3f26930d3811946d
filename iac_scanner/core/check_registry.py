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
Check registry – the catalog of every check the scanner can run.

Architecture
~~~~~~~~~~~~

Built-in checks live in the :mod:`iac_scanner.checks` package.  Each module
declares its checks as module-level :class:`~iac_scanner.core.check.Check`
constants and lists them in a ``CHECKS`` tuple:

.. code-block:: text

    iac_scanner/checks/
        aws001.py           # CHECKS = (AWS001,)
        aws035.py           # CHECKS = (AWS035,)
        ...

At startup the :class:`CheckLoader` imports those modules once, collects
every ``CHECKS`` entry and hands them to a :class:`CheckRegistry`, which is
then frozen.  Nothing registers checks as an import side effect.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from collections.abc import Iterable, Iterator
from types import ModuleType

from ..config.constants import IacScannerConstants
from .check import Check
from .exceptions import CheckRegistrationError
from .models import Provider

logger = logging.getLogger(__name__)

_BUILT_IN_CHECKS_PACKAGE = IacScannerConstants.CHECKS_PACKAGE

# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class CheckRegistry:
    """Ordered catalog of checks keyed by code.

    The registry is populated once at startup and then frozen.  After
    :meth:`freeze` it is **read-only**, so concurrent reads need no locking.
    """

    def __init__(self) -> None:
        self._checks: dict[str, Check] = {}
        self._frozen = False

    # -- Mutation (used during startup) ------------------------------------

    def register(self, check: Check) -> None:
        """Register a single check.

        Raises :class:`CheckRegistrationError` if a check with the same code
        is already registered or the registry has been frozen.
        """
        if self._frozen:
            raise CheckRegistrationError(f"Cannot register check '{check.code}': registry is frozen")
        if not isinstance(check, Check):
            raise CheckRegistrationError(f"Expected a Check, got {type(check).__name__}")
        if check.code in self._checks:
            raise CheckRegistrationError(f"Check code collision: '{check.code}' is already registered")
        self._checks[check.code] = check
        logger.debug("Registered check %s (%s)", check.code, check.provider.value)

    def register_all(self, checks: Iterable[Check]) -> None:
        """Register *checks* in order."""
        for check in checks:
            self.register(check)

    def freeze(self) -> CheckRegistry:
        """End the startup phase; later registration attempts fail."""
        self._frozen = True
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    # -- Read-only accessors ------------------------------------------------

    def get(self, code: str) -> Check | None:
        """Look up a check by code."""
        return self._checks.get(code)

    def all(self) -> tuple[Check, ...]:
        """Return every registered check in registration order."""
        return tuple(self._checks.values())

    def codes(self) -> list[str]:
        """Return registered codes in registration order."""
        return list(self._checks)

    def for_provider(self, provider: Provider | str) -> tuple[Check, ...]:
        provider = Provider(provider)
        return tuple(c for c in self._checks.values() if c.provider == provider)

    def validate_documentation(self) -> dict[str, list[str]]:
        """Return a mapping of check code → missing documentation fields.

        An empty mapping means every registered check is fully documented.
        """
        problems: dict[str, list[str]] = {}
        for code, check in self._checks.items():
            missing = check.documentation.missing_fields()
            if missing:
                problems[code] = missing
        return problems

    def __len__(self) -> int:
        return len(self._checks)

    def __contains__(self, code: object) -> bool:
        return code in self._checks

    def __iter__(self) -> Iterator[Check]:
        return iter(self.all())


# ---------------------------------------------------------------------------
# Check loader
# ---------------------------------------------------------------------------


class CheckLoader:
    """Discovers check modules in a package and builds a registry from them."""

    def __init__(self, package: str = _BUILT_IN_CHECKS_PACKAGE):
        self.package = package

    def iter_modules(self) -> list[ModuleType]:
        """Import every public module of the check package, sorted by name.

        Import errors propagate: a broken built-in check must stop the
        scanner at startup rather than silently drop a rule.
        """
        pkg = importlib.import_module(self.package)
        modules: list[ModuleType] = []
        for info in sorted(pkgutil.iter_modules(pkg.__path__), key=lambda m: m.name):
            if info.name.startswith("_") or info.ispkg:
                continue
            modules.append(importlib.import_module(f"{self.package}.{info.name}"))
        return modules

    def discover_checks(self) -> list[Check]:
        """Collect the ``CHECKS`` of every module, in module order."""
        checks: list[Check] = []
        for module in self.iter_modules():
            module_checks = getattr(module, "CHECKS", None)
            if module_checks is None:
                logger.debug("Module %s declares no CHECKS, skipping", module.__name__)
                continue
            checks.extend(module_checks)
        logger.debug("Discovered %d checks in %s", len(checks), self.package)
        return checks

    def build_registry(self, extra_checks: Iterable[Check] | None = None) -> CheckRegistry:
        """Discover checks, register them plus *extra_checks*, and freeze."""
        registry = CheckRegistry()
        registry.register_all(self.discover_checks())
        if extra_checks:
            registry.register_all(extra_checks)
        return registry.freeze()


_default_registry: CheckRegistry | None = None


def default_registry() -> CheckRegistry:
    """Return the frozen registry of built-in checks, building it on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = CheckLoader().build_registry()
    return _default_registry
