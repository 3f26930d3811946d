# Copyright 2026 Cisco Systems, Inc. and its affiliates
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
Tests for the evaluation protocol and the boolean-guard template.
"""

import pytest

from iac_scanner.core.context import Context
from iac_scanner.core.evaluation import render_value, require_true_attribute
from iac_scanner.core.models import Severity


class TestRenderValue:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (False, "false"),
            (True, "true"),
            (None, "null"),
            ("FALSE", '"FALSE"'),
            (0, "0"),
            (1.5, "1.5"),
            ([1, 2], "[1, 2]"),
            ({"b": 1, "a": 2}, '{"a": 2, "b": 1}'),
            ('a"b', '"a\\"b"'),
            ("back\\slash", '"back\\\\slash"'),
        ],
    )
    def test_render(self, value, expected):
        assert render_value(value) == expected


class TestRequireTrueAttribute:
    """The three-way decision: absent, falsy, true."""

    def test_missing_attribute(self, make_check, make_block, empty_context):
        block = make_block("widget", "w1")
        findings = make_check().run(block, empty_context)

        assert len(findings) == 1
        finding = findings[0]
        assert finding.severity == Severity.ERROR
        assert finding.range == block.range
        assert finding.attribute is None
        assert "widget.w1" in finding.message
        assert "missing hardened" in finding.message

    @pytest.mark.parametrize("value", [False, "false", "False", "FALSE"])
    def test_falsy_attribute(self, make_check, make_block, empty_context, value):
        block = make_block("widget", "w1", hardened=value)
        attr = block.get_attribute("hardened")
        findings = make_check().run(block, empty_context)

        assert len(findings) == 1
        finding = findings[0]
        assert finding.severity == Severity.ERROR
        assert finding.range == attr.range
        assert finding.range != block.range
        assert finding.attribute is attr
        assert f"hardened set to {render_value(value)}" in finding.message

    @pytest.mark.parametrize("value", [None, 0, 1, "yes", ["true"]])
    def test_other_literals_are_falsy(self, make_check, make_block, empty_context, value):
        findings = make_check().run(make_block("widget", "w1", hardened=value), empty_context)
        assert len(findings) == 1
        assert findings[0].attribute is not None

    @pytest.mark.parametrize("value", [True, "true", "TRUE", "True"])
    def test_true_attribute(self, make_check, make_block, empty_context, value):
        assert make_check().run(make_block("widget", "w1", hardened=value), empty_context) == []

    def test_custom_severity(self, make_check, make_block, empty_context):
        check = make_check(check_func=require_true_attribute("hardened", "a widget", severity=Severity.WARNING))
        findings = check.run(make_block("widget", "w1"), empty_context)
        assert findings[0].severity == Severity.WARNING

    def test_function_is_named_after_attribute(self):
        assert require_true_attribute("hardened", "a widget").__name__ == "require_hardened"

    def test_deterministic(self, make_check, make_block):
        check = make_check()
        block = make_block("widget", "w1", hardened="false")
        context = Context([block])
        assert check.run(block, context) == check.run(block, context)

    def test_does_not_mutate_block(self, make_check, make_block, empty_context):
        block = make_block("widget", "w1", hardened=False)
        before = dict(block.attributes)
        make_check().run(block, empty_context)
        assert dict(block.attributes) == before
        assert block.labels == ("widget", "w1")
