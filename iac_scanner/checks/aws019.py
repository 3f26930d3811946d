# Copyright 2026 Cisco Systems, Inc. and its affiliates
# SPDX-License-Identifier: Apache-2.0

"""KMS customer master key rotation.

Rules: AWS019.
"""

from __future__ import annotations

from iac_scanner.core.check import Check, CheckDocumentation
from iac_scanner.core.evaluation import require_true_attribute
from iac_scanner.core.models import Provider

AWS019 = Check(
    code="AWS019",
    documentation=CheckDocumentation(
        summary="A KMS key is not configured to auto-rotate.",
        impact="Long life KMS keys increase the attack surface when compromised",
        resolution="Configure KMS key to auto rotate",
        explanation="""
You should configure your KMS keys to auto rotate to maintain security and defend against compromise.
""",
        bad_example="""
resource "aws_kms_key" "bad_example" {
        enable_key_rotation = false
}
""",
        good_example="""
resource "aws_kms_key" "good_example" {
        enable_key_rotation = true
}
""",
        links=(
            "https://registry.terraform.io/providers/hashicorp/aws/latest/docs/resources/kms_key#enable_key_rotation",
            "https://docs.aws.amazon.com/kms/latest/developerguide/rotate-keys.html",
        ),
    ),
    provider=Provider.AWS,
    required_types={"resource"},
    required_labels={"aws_kms_key"},
    check_func=require_true_attribute("enable_key_rotation", "a KMS key without auto-rotation"),
)

CHECKS = (AWS019,)
