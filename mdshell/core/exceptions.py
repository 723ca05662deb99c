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

"""mdshell exceptions.

This module defines custom exceptions for mdshell operations.
All exceptions inherit from MdShellError for easy catching.

Example:
    >>> from mdshell.core.extractor import extract_commands
    >>> from mdshell.core.exceptions import MalformedFenceError
    >>>
    >>> try:
    ...     commands = "".join(extract_commands(markdown, os_map))
    ... except MalformedFenceError as e:
    ...     print(f"Bad fence: {e.info}")
"""


class MdShellError(Exception):
    """Base exception for all mdshell errors."""

    pass


class DocumentLoadError(MdShellError):
    """Raised when the Markdown document cannot be read.

    This can indicate:
    - Missing or unreadable file
    - Content that is not valid UTF-8
    """

    pass


class OsReleaseError(MdShellError):
    """Raised when the os-release file cannot be opened or read."""

    pass


class OsReleaseParseError(OsReleaseError):
    """Raised when an os-release line has no ``=`` separator."""

    def __init__(self, line: str, line_number: int):
        self.line = line
        self.line_number = line_number
        super().__init__(f"line {line_number} is not KEY=VALUE: {line!r}")


class MalformedFenceError(MdShellError):
    """Raised when a fence info-string carries an OS filter that is not KEY=VALUE."""

    def __init__(self, info: str, token: str):
        self.info = info
        self.token = token
        super().__init__(f"malformed OS filter {token!r} in fence {info!r}")


class ConfigError(MdShellError):
    """Raised when a configuration file cannot be loaded or has unknown keys."""

    pass
