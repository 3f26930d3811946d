# Copyright 2026 Cisco Systems, Inc. and its affiliates
# SPDX-License-Identifier: Apache-2.0

"""Normalisation of attribute literals to boolean truth values.

Every check that tests an "enabled/disabled" style attribute goes through
:func:`is_boolean_or_string_true` so that "truthy" means the same thing
across the whole rule set:

* a native ``bool`` is returned as-is;
* a ``str`` is true iff it equals ``"true"`` ignoring letter case;
* anything else (``None``, numbers, lists, maps) is false.

No other literals (``"yes"``, ``"1"``, ``1``) count as true.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .models import Attribute


def is_boolean_or_string_true(value: Any) -> bool:
    """Coerce a raw attribute value to ``bool``."""
    # bool must be tested before anything numeric, since bool is an int subclass
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() == "true"
    return False


def coerce_attribute(attribute: Attribute | None) -> bool:
    """Coerce an attribute's value; a missing attribute is false."""
    if attribute is None:
        return False
    return is_boolean_or_string_true(attribute.value)
