# Copyright 2026 Cisco Systems, Inc. and its affiliates
# SPDX-License-Identifier: Apache-2.0

"""S3 bucket canned ACLs that grant public access.

Rules: AWS001.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from iac_scanner.core.check import Check, CheckDocumentation
from iac_scanner.core.models import Provider, Severity

if TYPE_CHECKING:
    from iac_scanner.core.context import Context
    from iac_scanner.core.models import Block, Finding

PUBLIC_ACLS = frozenset({"public-read", "public-read-write", "website"})


def check_public_acl(check: Check, block: Block, context: Context) -> list[Finding]:
    """Flag buckets whose ``acl`` is one of the public canned ACLs."""
    acl_attr = block.get_attribute("acl")
    if acl_attr is None or not isinstance(acl_attr.value, str):
        return []
    if acl_attr.value.lower() not in PUBLIC_ACLS:
        return []
    return [
        check.new_result_with_value_annotation(
            f"Resource '{block.full_name()}' has an ACL which allows public access.",
            acl_attr.range,
            acl_attr,
            Severity.WARNING,
        )
    ]


AWS001 = Check(
    code="AWS001",
    documentation=CheckDocumentation(
        summary="S3 Bucket has an ACL defined which allows public access.",
        impact="The contents of the bucket can be accessed publicly",
        resolution="Apply a more restrictive bucket ACL",
        explanation="""
S3 bucket permissions should be set to deny public access unless explicitly required.

Granting write access publicly could lead to data deletion or storage of unauthorised data.
""",
        bad_example="""
resource "aws_s3_bucket" "bad_example" {
        acl = "public-read"
}
""",
        good_example="""
resource "aws_s3_bucket" "good_example" {
        acl = "private"
}
""",
        links=(
            "https://registry.terraform.io/providers/hashicorp/aws/latest/docs/resources/s3_bucket",
            "https://docs.aws.amazon.com/AmazonS3/latest/userguide/acl-overview.html#canned-acl",
        ),
    ),
    provider=Provider.AWS,
    required_types={"resource"},
    required_labels={"aws_s3_bucket"},
    check_func=check_public_acl,
)

CHECKS = (AWS001,)
