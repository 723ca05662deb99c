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
Constants for mdshell.

Separators of the fence info-string grammar:

    <lang>[:<ctx-list>][;<os-list>]
"""

from .. import __version__ as PACKAGE_VERSION


class MdShellConstants:
    """Constants used throughout the extractor."""

    VERSION = PACKAGE_VERSION

    # Only fences tagged with this language are ever selected
    SHELL_LANGUAGE = "sh"

    # Fence info-string grammar
    PARAMS_SEPARATOR = ":"
    LIST_SEPARATOR = ";"
    CONTEXT_SEPARATOR = ","
    KEY_VALUE_SEPARATOR = "="

    # Leading shell prompt markers removed by --strip-prompts
    PROMPT_MARKERS = "$#|"

    # Conventional location of the distribution identity file
    DEFAULT_OS_RELEASE_PATH = "/etc/os-release"
