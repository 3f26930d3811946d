# Copyright 2026 Cisco Systems, Inc. and its affiliates
# SPDX-License-Identifier: Apache-2.0

"""
Built-in checks.

Each module in this package defines one or more checks and lists them in a
module-level ``CHECKS`` tuple, which :class:`~iac_scanner.core.check_registry.CheckLoader`
collects at startup.  Modules starting with ``_`` are skipped.

Convention
~~~~~~~~~~

A check whose signal is a single boolean attribute uses
:func:`~iac_scanner.core.evaluation.require_true_attribute`.  Other shapes
write their own function::

    def check_<aspect>(check: Check, block: Block, context: Context) -> list[Finding]:
        ...

Evaluation functions are pure: they read the block and context and return
findings, nothing else.
"""
