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
Configuration class for IaC Scanner.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from ..core.scan_policy import ScanPolicy


@dataclass
class Config:
    """
    Runtime configuration for IaC Scanner.

    Explicit arguments win; anything left at its default is filled from the
    environment in ``__post_init__``.
    """

    # Policy
    policy_path: str | None = None
    excluded_checks: list[str] = field(default_factory=list)

    # Logging
    log_level: str = "WARNING"

    def __post_init__(self):
        """Load configuration from environment variables if not provided."""

        if self.policy_path is None:
            self.policy_path = os.getenv("IAC_SCANNER_POLICY")

        if self.log_level == "WARNING":
            if env_level := os.getenv("IAC_SCANNER_LOG_LEVEL"):
                self.log_level = env_level.upper()

        if not self.excluded_checks:
            if env_exclude := os.getenv("IAC_SCANNER_EXCLUDE"):
                self.excluded_checks = [c.strip() for c in env_exclude.split(",") if c.strip()]

    @property
    def log_level_value(self) -> int:
        """Numeric logging level; unknown names fall back to WARNING."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING

    def load_policy(self) -> ScanPolicy:
        """Load the configured policy and apply ``excluded_checks`` on top."""
        policy = ScanPolicy.from_yaml(self.policy_path) if self.policy_path else ScanPolicy.default()
        policy.excluded_checks.update(self.excluded_checks)
        return policy

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create configuration from environment variables.

        Returns:
            Config instance with values from environment
        """
        return cls()

    @classmethod
    def from_file(cls, config_file: Path) -> "Config":
        """
        Load configuration from .env file.

        Args:
            config_file: Path to .env file

        Returns:
            Config instance
        """
        if config_file.exists():
            load_dotenv(config_file, override=True)

        return cls.from_env()
