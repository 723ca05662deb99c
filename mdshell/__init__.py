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
mdshell - Extract shell commands from Markdown fenced code blocks.
"""

__version__ = "0.1.0"


def __getattr__(name: str):
    """Lazy-load public API symbols on first access.

    Importing the package, e.g. for ``__version__``, does not pull in
    markdown-it-py or PyYAML.
    """
    _lazy_map = {
        "Config": (".config.config", "Config"),
        "MdShellConstants": (".config.constants", "MdShellConstants"),
        "FenceDescriptor": (".core.fence", "FenceDescriptor"),
        "include_block": (".core.fence", "include_block"),
        "extract_commands": (".core.extractor", "extract_commands"),
        "filter_events": (".core.extractor", "filter_events"),
        "markdown_events": (".core.events", "markdown_events"),
        "load_os_release": (".core.os_release", "load_os_release"),
        "read_os_release": (".core.os_release", "read_os_release"),
        "MdShellError": (".core.exceptions", "MdShellError"),
    }
    if name in _lazy_map:
        module_path, attr = _lazy_map[name]
        import importlib

        mod = importlib.import_module(module_path, __package__)
        val = getattr(mod, attr)
        # Cache on the module so __getattr__ is only called once per symbol
        globals()[name] = val
        return val
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "extract_commands",
    "filter_events",
    "markdown_events",
    "include_block",
    "FenceDescriptor",
    "load_os_release",
    "read_os_release",
    "Config",
    "MdShellConstants",
    "MdShellError",
]
