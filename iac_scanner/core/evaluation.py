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
Evaluation protocol helpers.

An evaluation function receives ``(check, block, context)`` and returns a
finite, possibly empty list of findings.  It must not mutate the block or
context and must not perform I/O, so the same check can run concurrently
against many blocks.

Most encryption and hardening rules monitor a single boolean attribute.
:func:`require_true_attribute` builds the evaluation function for that
shape:

1. attribute absent → one ERROR finding at the block's range;
2. attribute present but not true → one ERROR finding at the attribute's
   range, pointing at the attribute;
3. attribute true → no findings.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from .coercion import is_boolean_or_string_true
from .models import Severity

if TYPE_CHECKING:
    from collections.abc import Callable

    from .check import Check
    from .context import Context
    from .models import Block, Finding


def render_value(value: Any) -> str:
    """Render a raw attribute literal the way it would appear in HCL."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, default=str, sort_keys=True)


def missing_attribute_message(block: Block, description: str, attribute_name: str) -> str:
    return f"Resource '{block.full_name()}' defines {description} (missing {attribute_name} attribute)."


def falsy_attribute_message(block: Block, description: str, attribute_name: str, value: Any) -> str:
    return f"Resource '{block.full_name()}' defines {description} ({attribute_name} set to {render_value(value)})."


def require_true_attribute(
    attribute_name: str,
    description: str,
    severity: Severity = Severity.ERROR,
) -> Callable[[Check, Block, Context], list[Finding]]:
    """Build an evaluation function that requires *attribute_name* to be true.

    Args:
        attribute_name: The boolean attribute guarding the security property,
            e.g. ``at_rest_encryption_enabled``.
        description: Noun phrase used in messages, e.g.
            ``"an unencrypted Elasticache Replication Group"``.
        severity: Severity of both finding kinds.
    """

    def _evaluate(check: Check, block: Block, context: Context) -> list[Finding]:
        attr = block.get_attribute(attribute_name)
        if attr is None:
            return [
                check.new_result(
                    missing_attribute_message(block, description, attribute_name),
                    block.range,
                    severity,
                )
            ]
        if not is_boolean_or_string_true(attr.value):
            return [
                check.new_result_with_value_annotation(
                    falsy_attribute_message(block, description, attribute_name, attr.value),
                    attr.range,
                    attr,
                    severity,
                )
            ]
        return []

    _evaluate.__name__ = f"require_{attribute_name}"
    _evaluate.__qualname__ = _evaluate.__name__
    return _evaluate
