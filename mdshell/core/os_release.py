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
Loader for ``os-release`` style KEY=VALUE files.

Values are kept verbatim: ``ID="debian"`` maps ``ID`` to ``'"debian"'``,
quotes included, unless the caller opts into unquoting.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from pathlib import Path

from ..config.constants import MdShellConstants
from .exceptions import OsReleaseError, OsReleaseParseError

logger = logging.getLogger(__name__)

_SEP = MdShellConstants.KEY_VALUE_SEPARATOR


def _unquote(value: str) -> str:
    """Strip one pair of matching surrounding quotes."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def load_os_release(
    stream: Iterable[bytes] | Iterable[str],
    strict: bool = True,
    unquote: bool = False,
) -> dict[str, str]:
    """
    Parse an os-release stream into a key/value map.

    Each line is split on its first ``=``. Later duplicates overwrite
    earlier ones.

    Args:
        stream: Binary or text stream (or any iterable of lines)
        strict: Raise on lines without ``=`` instead of skipping them
        unquote: Strip surrounding quotes from values

    Returns:
        Mapping of keys to values

    Raises:
        OsReleaseParseError: If a line has no ``=`` and ``strict`` is set
        OsReleaseError: If the stream is not valid UTF-8
    """
    os_map: dict[str, str] = {}

    for line_number, raw in enumerate(stream, 1):
        if isinstance(raw, bytes):
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise OsReleaseError(f"line {line_number} is not valid UTF-8: {e}") from e
        else:
            line = raw
        line = line.rstrip("\n").removesuffix("\r")

        key, sep, value = line.partition(_SEP)
        if not sep:
            if strict:
                raise OsReleaseParseError(line, line_number)
            logger.warning("Skipping os-release line %d without '=': %r", line_number, line)
            continue

        os_map[key] = _unquote(value) if unquote else value

    logger.debug("Loaded %d os-release keys", len(os_map))
    return os_map


def parse_os_release(text: str, strict: bool = True, unquote: bool = False) -> dict[str, str]:
    """Parse os-release content held in a string."""
    return load_os_release(io.StringIO(text), strict=strict, unquote=unquote)


def read_os_release(path: str | Path, strict: bool = True, unquote: bool = False) -> dict[str, str]:
    """
    Open and parse an os-release file.

    Raises:
        OsReleaseError: If the file cannot be opened or read
        OsReleaseParseError: On a malformed line under the strict policy
    """
    try:
        with open(path, "rb") as fh:
            return load_os_release(fh, strict=strict, unquote=unquote)
    except OsReleaseParseError:
        raise
    except (OSError, OsReleaseError) as e:
        raise OsReleaseError(f"Failed to read os-release file {path}: {e}") from e
