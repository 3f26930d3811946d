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

"""IaC Scanner exceptions.

This module defines custom exceptions for IaC Scanner operations.
All exceptions inherit from IacScannerError for easy catching.

Example:
    >>> from iac_scanner.core.check_registry import CheckRegistry
    >>> from iac_scanner.core.exceptions import CheckRegistrationError
    >>>
    >>> registry = CheckRegistry()
    >>>
    >>> try:
    ...     registry.register_all(checks)
    ... except CheckRegistrationError as e:
    ...     print(f"Refusing to start: {e}")
"""


class IacScannerError(Exception):
    """Base exception for all IaC Scanner errors."""

    pass


class CheckRegistrationError(IacScannerError, ValueError):
    """Raised when a check cannot be added to the registry.

    This can indicate:
    - Two checks declaring the same code
    - Registration attempted after the registry was frozen
    - An object that is not a Check
    """

    pass


class CheckDefinitionError(IacScannerError, ValueError):
    """Raised when a check is constructed with invalid fields.

    This indicates:
    - Empty check code
    - Non-callable check function
    """

    pass


class PolicyLoadError(IacScannerError):
    """Raised when a scan policy file cannot be parsed."""

    pass
