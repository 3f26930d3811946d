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
Scenario tests for the built-in AWS checks.
"""

import pytest

from iac_scanner.checks.aws001 import AWS001
from iac_scanner.checks.aws019 import AWS019
from iac_scanner.checks.aws035 import AWS035
from iac_scanner.checks.aws036 import AWS036
from iac_scanner.core.models import Severity


class TestAWS035ElasticacheAtRestEncryption:
    def test_missing_attribute(self, make_block, empty_context):
        block = make_block(
            "aws_elasticache_replication_group",
            "bad_example",
            replication_group_id="foo",
            replication_group_description="my foo cluster",
        )
        findings = AWS035.run(block, empty_context)

        assert len(findings) == 1
        finding = findings[0]
        assert finding.rule_id == "AWS035"
        assert finding.severity == Severity.ERROR
        assert finding.range == block.range
        assert "bad_example" in finding.message
        assert "missing at_rest_encryption_enabled" in finding.message
        assert finding.message == (
            "Resource 'aws_elasticache_replication_group.bad_example' defines an unencrypted "
            "Elasticache Replication Group (missing at_rest_encryption_enabled attribute)."
        )

    def test_disabled(self, make_block, empty_context):
        block = make_block("aws_elasticache_replication_group", "bad_example", at_rest_encryption_enabled=False)
        attr = block.get_attribute("at_rest_encryption_enabled")
        findings = AWS035.run(block, empty_context)

        assert len(findings) == 1
        finding = findings[0]
        assert finding.severity == Severity.ERROR
        assert finding.range == attr.range
        assert finding.attribute is attr
        assert "false" in finding.message
        assert finding.message == (
            "Resource 'aws_elasticache_replication_group.bad_example' defines an unencrypted "
            "Elasticache Replication Group (at_rest_encryption_enabled set to false)."
        )

    def test_disabled_as_string(self, make_block, empty_context):
        block = make_block("aws_elasticache_replication_group", "bad_example", at_rest_encryption_enabled="FALSE")
        findings = AWS035.run(block, empty_context)
        assert len(findings) == 1
        assert findings[0].range_annotation == '"FALSE"'

    @pytest.mark.parametrize("value", [True, "true", "True"])
    def test_enabled(self, make_block, empty_context, value):
        block = make_block("aws_elasticache_replication_group", "good_example", at_rest_encryption_enabled=value)
        assert AWS035.run(block, empty_context) == []

    def test_other_resource_types_ignored(self, make_block, empty_context):
        assert not AWS035.matches(make_block("aws_elasticache_cluster", "c"))
        assert AWS035.run(make_block("aws_elasticache_cluster", "c"), empty_context) == []

    def test_data_block_ignored(self, make_block):
        assert not AWS035.matches(make_block("aws_elasticache_replication_group", "c", kind="data"))

    def test_links(self):
        assert len(AWS035.documentation.links) == 2


class TestAWS036ElasticacheTransitEncryption:
    def test_missing(self, make_block, empty_context):
        findings = AWS036.run(make_block("aws_elasticache_replication_group", "r"), empty_context)
        assert len(findings) == 1
        assert "missing transit_encryption_enabled" in findings[0].message

    def test_disabled(self, make_block, empty_context):
        block = make_block("aws_elasticache_replication_group", "r", transit_encryption_enabled="false")
        findings = AWS036.run(block, empty_context)
        assert len(findings) == 1
        assert findings[0].attribute is block.get_attribute("transit_encryption_enabled")

    def test_enabled(self, make_block, empty_context):
        block = make_block("aws_elasticache_replication_group", "r", transit_encryption_enabled=True)
        assert AWS036.run(block, empty_context) == []


class TestAWS019KmsKeyRotation:
    def test_missing(self, make_block, empty_context):
        block = make_block("aws_kms_key", "bad_example")
        findings = AWS019.run(block, empty_context)
        assert len(findings) == 1
        assert findings[0].range == block.range
        assert "missing enable_key_rotation" in findings[0].message

    def test_disabled(self, make_block, empty_context):
        findings = AWS019.run(make_block("aws_kms_key", "bad_example", enable_key_rotation=False), empty_context)
        assert len(findings) == 1
        assert "enable_key_rotation set to false" in findings[0].message

    def test_enabled(self, make_block, empty_context):
        assert AWS019.run(make_block("aws_kms_key", "good_example", enable_key_rotation=True), empty_context) == []


class TestAWS001PublicBucketAcl:
    @pytest.mark.parametrize("acl", ["public-read", "public-read-write", "website", "PUBLIC-READ"])
    def test_public_acls(self, make_block, empty_context, acl):
        block = make_block("aws_s3_bucket", "bad_example", acl=acl)
        findings = AWS001.run(block, empty_context)
        assert len(findings) == 1
        assert findings[0].severity == Severity.WARNING
        assert findings[0].attribute is block.get_attribute("acl")
        assert "aws_s3_bucket.bad_example" in findings[0].message

    @pytest.mark.parametrize("acl", ["private", "authenticated-read", None, 42])
    def test_non_public_acls(self, make_block, empty_context, acl):
        assert AWS001.run(make_block("aws_s3_bucket", "good_example", acl=acl), empty_context) == []

    def test_missing_acl(self, make_block, empty_context):
        assert AWS001.run(make_block("aws_s3_bucket", "good_example"), empty_context) == []
