# Copyright 2026 Cisco Systems, Inc. and its affiliates
# SPDX-License-Identifier: Apache-2.0

"""ElastiCache replication group in-transit encryption.

Rules: AWS036.
"""

from __future__ import annotations

from iac_scanner.core.check import Check, CheckDocumentation
from iac_scanner.core.evaluation import require_true_attribute
from iac_scanner.core.models import Provider

AWS036 = Check(
    code="AWS036",
    documentation=CheckDocumentation(
        summary="Elasticache Replication Group uses unencrypted traffic.",
        impact="In transit data in the Replication Group could be read if intercepted",
        resolution="Enable in transit encryption for replication group",
        explanation="""
Traffic flowing between Elasticache replication nodes should be encrypted to ensure sensitive data is kept private.
""",
        bad_example="""
resource "aws_elasticache_replication_group" "bad_example" {
        replication_group_id = "foo"
        replication_group_description = "my foo cluster"

        transit_encryption_enabled = false
}
""",
        good_example="""
resource "aws_elasticache_replication_group" "good_example" {
        replication_group_id = "foo"
        replication_group_description = "my foo cluster"

        transit_encryption_enabled = true
}
""",
        links=(
            "https://registry.terraform.io/providers/hashicorp/aws/latest/docs/resources/elasticache_replication_group#transit_encryption_enabled",
            "https://docs.aws.amazon.com/AmazonElastiCache/latest/red-ug/in-transit-encryption.html",
        ),
    ),
    provider=Provider.AWS,
    required_types={"resource"},
    required_labels={"aws_elasticache_replication_group"},
    check_func=require_true_attribute(
        "transit_encryption_enabled",
        "an Elasticache Replication Group with unencrypted traffic",
    ),
)

CHECKS = (AWS036,)
