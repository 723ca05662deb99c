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

"""Shell prompt normalization for extracted command text."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from ..config.constants import MdShellConstants

_PROMPT_RE = re.compile(rf"^\s*[{re.escape(MdShellConstants.PROMPT_MARKERS)}]\s*")


def strip_prompt(line: str) -> str:
    """Remove a leading ``$``, ``#`` or ``|`` prompt marker from *line*."""
    return _PROMPT_RE.sub("", line, count=1)


def strip_prompts(chunks: Iterable[str]) -> Iterator[str]:
    """
    Normalize extracted text line by line.

    Prompt markers are removed, blank lines are dropped, and every
    remaining line is yielded with a trailing newline.
    """
    for chunk in chunks:
        for line in chunk.splitlines():
            cleaned = strip_prompt(line).rstrip()
            if cleaned:
                yield cleaned + "\n"
