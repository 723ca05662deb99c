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
Fence info-string parsing and block selection.

A fenced block is selected when its info-string has the form::

    sh[:<ctx-list>][;<os-list>]

and both lists are satisfied:
  - ``ctx-list`` (comma separated): at least one tag is in the caller's context
  - ``os-list`` (whitespace separated ``KEY=VALUE``): at least one pair matches os-release

An empty list places no constraint. Without ``;`` the whole parameter
string is the ``os-list``. Comparisons are exact; no whitespace is trimmed
inside ``ctx-list``.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Mapping
from dataclasses import dataclass

from ..config.constants import MdShellConstants
from .exceptions import MalformedFenceError

C = MdShellConstants


@dataclass(frozen=True)
class FenceDescriptor:
    """Parsed form of a fence info-string."""

    language: str
    contexts: frozenset[str] = frozenset()
    os_filters: tuple[tuple[str, str], ...] = ()

    @classmethod
    def parse(cls, info: str) -> FenceDescriptor:
        """
        Parse a fence info-string.

        Parameters of non-shell fences are not inspected.

        Raises:
            MalformedFenceError: If an OS filter is not exactly one KEY=VALUE pair
        """
        language, has_params, params = info.partition(C.PARAMS_SEPARATOR)
        if language != C.SHELL_LANGUAGE or not has_params:
            return cls(language=language)

        ctx_list, has_sep, os_list = params.partition(C.LIST_SEPARATOR)
        if not has_sep:
            ctx_list, os_list = "", params

        contexts = frozenset(ctx_list.split(C.CONTEXT_SEPARATOR)) if ctx_list else frozenset()

        os_filters = []
        for token in os_list.split():
            if token.count(C.KEY_VALUE_SEPARATOR) != 1:
                raise MalformedFenceError(info, token)
            key, _, value = token.partition(C.KEY_VALUE_SEPARATOR)
            os_filters.append((key, value))

        return cls(language=language, contexts=contexts, os_filters=tuple(os_filters))

    @property
    def is_shell(self) -> bool:
        return self.language == C.SHELL_LANGUAGE

    def matches_context(self, context: Collection[str]) -> bool:
        if not self.contexts:
            return True
        return any(tag in context for tag in self.contexts)

    def matches_os(self, os_map: Mapping[str, str]) -> bool:
        if not self.os_filters:
            return True
        return any(os_map.get(key) == value for key, value in self.os_filters)

    def matches(self, context: Collection[str], os_map: Mapping[str, str]) -> bool:
        """Return True if a block with this descriptor should be extracted."""
        if not self.is_shell:
            return False
        return self.matches_context(context) and self.matches_os(os_map)


def include_block(info: str, context: Collection[str], os_map: Mapping[str, str]) -> bool:
    """Decide whether the fenced block with *info* is selected."""
    return FenceDescriptor.parse(info).matches(context, os_map)


def make_predicate(context: Collection[str], os_map: Mapping[str, str]) -> Callable[[str], bool]:
    """Bind *context* and *os_map* into a predicate over fence info-strings."""
    context = frozenset(context)

    def _predicate(info: str) -> bool:
        return include_block(info, context, os_map)

    return _predicate
