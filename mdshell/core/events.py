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
Markdown event stream.

Flattens the markdown-it-py token stream into start/text/end events, the
shape the extractor walks. A fenced block becomes ``FENCE_START`` carrying
its info-string, one ``TEXT`` event per content line (newline kept) and
``FENCE_END``. Paragraph text becomes ``TEXT`` events; everything else,
indented code blocks included, is ``OTHER``.

markdown-it-py normalizes ``\r\n`` and lone ``\r`` to ``\n`` before tokenizing, so
block text from CRLF documents comes out with ``\n`` line endings.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import NamedTuple

from markdown_it import MarkdownIt
from markdown_it.common.utils import unescapeAll
from markdown_it.token import Token


class EventKind(Enum):
    """Kind of Markdown event."""

    FENCE_START = "fence_start"
    FENCE_END = "fence_end"
    TEXT = "text"
    OTHER = "other"


class Event(NamedTuple):
    """A single Markdown event.

    ``text`` holds the info-string for ``FENCE_START``, the content for
    ``TEXT`` and the token type for ``OTHER``.
    """

    kind: EventKind
    text: str = ""


def _fence_events(token: Token) -> Iterator[Event]:
    yield Event(EventKind.FENCE_START, unescapeAll(token.info).strip())
    for line in token.content.splitlines(keepends=True):
        yield Event(EventKind.TEXT, line)
    yield Event(EventKind.FENCE_END)


def _inline_events(token: Token) -> Iterator[Event]:
    for child in token.children or ():
        if child.type == "text":
            yield Event(EventKind.TEXT, child.content)
        else:
            yield Event(EventKind.OTHER, child.type)


def markdown_events(markdown: str, parser: MarkdownIt | None = None) -> Iterator[Event]:
    """
    Parse *markdown* and yield its events in document order.

    Args:
        markdown: CommonMark document
        parser: Parser to use (default: markdown-it-py CommonMark preset)
    """
    md = parser or MarkdownIt("commonmark")
    for token in md.parse(markdown):
        if token.type == "fence":
            yield from _fence_events(token)
        elif token.type == "inline":
            yield from _inline_events(token)
        else:
            yield Event(EventKind.OTHER, token.type)
