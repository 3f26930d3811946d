# Copyright 2026 Cisco Systems, Inc. and its affiliates
# SPDX-License-Identifier: Apache-2.0

"""ElastiCache replication group at-rest encryption.

Rules: AWS035.
"""

from __future__ import annotations

from iac_scanner.core.check import Check, CheckDocumentation
from iac_scanner.core.evaluation import require_true_attribute
from iac_scanner.core.models import Provider

AWS035 = Check(
    code="AWS035",
    documentation=CheckDocumentation(
        summary="Unencrypted Elasticache Replication Group.",
        impact="Data in the replication group could be readable if compromised",
        resolution="Enable encryption for replication group",
        explanation="""
You should ensure your Elasticache data is encrypted at rest to help prevent sensitive information from being read by unauthorised users.
""",
        bad_example="""
resource "aws_elasticache_replication_group" "bad_example" {
        replication_group_id = "foo"
        replication_group_description = "my foo cluster"

        at_rest_encryption_enabled = false
}
""",
        good_example="""
resource "aws_elasticache_replication_group" "good_example" {
        replication_group_id = "foo"
        replication_group_description = "my foo cluster"

        at_rest_encryption_enabled = true
}
""",
        links=(
            "https://registry.terraform.io/providers/hashicorp/aws/latest/docs/resources/elasticache_replication_group#at_rest_encryption_enabled",
            "https://docs.aws.amazon.com/AmazonElastiCache/latest/red-ug/at-rest-encryption.html",
        ),
    ),
    provider=Provider.AWS,
    required_types={"resource"},
    required_labels={"aws_elasticache_replication_group"},
    check_func=require_true_attribute(
        "at_rest_encryption_enabled",
        "an unencrypted Elasticache Replication Group",
    ),
)

CHECKS = (AWS035,)
