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
Tests for the scan-wide Context.
"""

from iac_scanner.core.context import Context


class TestContext:
    def test_lookups(self, make_block):
        bucket = make_block("aws_s3_bucket", "logs")
        key = make_block("aws_kms_key", "main")
        source = make_block("aws_s3_bucket", "logs", kind="data")
        context = Context([bucket, key, source])

        assert len(context) == 3
        assert context.get_resources_by_type("aws_s3_bucket") == [bucket]
        assert context.get_blocks_by_type("data") == [source]
        assert context.get_block_by_full_name("aws_kms_key.main") is key
        assert context.get_block_by_full_name("aws_kms_key.other") is None

    def test_blocks_are_snapshotted(self, make_block):
        blocks = [make_block("aws_kms_key", "main")]
        context = Context(blocks)
        blocks.append(make_block("aws_kms_key", "other"))
        assert len(context.blocks) == 1
        assert isinstance(context.blocks, tuple)
