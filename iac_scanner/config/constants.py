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
Constants for IaC Scanner.
"""

from pathlib import Path

from .._version import __version__ as PACKAGE_VERSION


class IacScannerConstants:
    """Constants used throughout the scanner."""

    VERSION = PACKAGE_VERSION

    # Project paths
    PACKAGE_ROOT = Path(__file__).parent.parent

    # Resource paths
    DATA_DIR = PACKAGE_ROOT / "data"
    DEFAULT_POLICY_PATH = DATA_DIR / "default_policy.yaml"
    CHECKS_PACKAGE = "iac_scanner.checks"

    @classmethod
    def get_data_path(cls) -> Path:
        """Get path to data directory."""
        return cls.DATA_DIR
