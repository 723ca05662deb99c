# Copyright 2026 Cisco Systems, Inc. and its affiliates
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

"""Tests for shell prompt normalization."""

import pytest

from mdshell.core.prompts import strip_prompt, strip_prompts


class TestStripPrompt:
    @pytest.mark.parametrize(
        "line, expected",
        [
            ("$ cargo build", "cargo build"),
            ("  $   cargo build", "cargo build"),
            ("# dnf install -y git", "dnf install -y git"),
            ("| tee log", "tee log"),
            ("cargo build", "cargo build"),
            ("echo $HOME", "echo $HOME"),
            ("$$ double", "$ double"),
        ],
    )
    def test_strip_prompt(self, line, expected):
        assert strip_prompt(line) == expected


class TestStripPrompts:
    def test_drops_blank_lines_and_adds_newlines(self):
        chunks = ["$ sudo apt update\n", "\n", "   \n", "$ sudo apt install -y git"]
        assert list(strip_prompts(chunks)) == ["sudo apt update\n", "sudo apt install -y git\n"]

    def test_bare_prompt_dropped(self):
        assert list(strip_prompts(["$\n", "#\n"])) == []

    def test_multiline_chunk(self):
        assert list(strip_prompts(["$ a\n$ b\n"])) == ["a\n", "b\n"]
