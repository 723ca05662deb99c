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
Command extraction from Markdown.

Walks the event stream with a single "dumping" flag: set on the start of a
selected fenced block, cleared on every fenced block end. Text seen while
the flag is set is yielded verbatim, so the output is exactly the content
of the selected blocks in document order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection, Iterable, Iterator, Mapping

from .events import Event, EventKind, markdown_events
from .fence import make_predicate

logger = logging.getLogger(__name__)


def filter_events(events: Iterable[Event], include: Callable[[str], bool]) -> Iterator[str]:
    """
    Yield the text of fenced blocks whose info-string satisfies *include*.

    Args:
        events: Markdown events in document order
        include: Predicate over fence info-strings

    Raises:
        MalformedFenceError: Propagated from *include*; text already
            yielded for earlier blocks stays emitted.
    """
    dumping = False
    for kind, text in events:
        if kind is EventKind.FENCE_START:
            if include(text):
                dumping = True
            logger.debug("Fenced block %r %s", text, "selected" if dumping else "skipped")
        elif kind is EventKind.FENCE_END:
            dumping = False
        elif kind is EventKind.TEXT and dumping:
            yield text


def extract_commands(
    markdown: str,
    os_map: Mapping[str, str],
    context: Collection[str] = (),
) -> Iterator[str]:
    """
    Extract shell command text from *markdown*.

    Args:
        markdown: CommonMark document
        os_map: Parsed os-release values
        context: Caller-supplied context tags

    Returns:
        Lazy iterator over the text of selected ``sh`` blocks
    """
    return filter_events(markdown_events(markdown), make_predicate(context, os_map))
