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

"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest before running tests.
All fixtures defined here are available to every test module without
explicit imports.
"""

from __future__ import annotations

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Reference documents
# ---------------------------------------------------------------------------

DEBIAN_OS_RELEASE = """\
PRETTY_NAME="Debian GNU/Linux 11 (bullseye)"
NAME="Debian GNU/Linux"
VERSION_ID="11"
VERSION="11 (bullseye)"
VERSION_CODENAME=bullseye
ID=debian
HOME_URL="https://www.debian.org/"
SUPPORT_URL="https://www.debian.org/support"
BUG_REPORT_URL="https://bugs.debian.org/"
"""

FEDORA_OS_RELEASE = """\
NAME="Fedora Linux"
VERSION="38 (Workstation Edition)"
ID=fedora
VERSION_ID=38
PRETTY_NAME="Fedora Linux 38 (Workstation Edition)"
"""

INSTALL_MARKDOWN = """\
# Welcome!

Welcome to Enarx.

# Getting Started

## Install Dependencies
### Fedora

```sh:ID=fedora
echo fedora
```

### Debian

```sh:ID=debian ID_LIKE=debian
echo debian
```

## Optional components

```sh:git,sev;
echo git or sev
```

```sh:notgit; ID=debian
echo notgit
```

```sh:git; ID=debian ID=fedora
echo git on debian or fedora
```

## Build Enarx

```sh
echo enarx
```
"""


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def debian_os_release() -> str:
    """os-release content of a Debian 11 host."""
    return DEBIAN_OS_RELEASE


@pytest.fixture
def debian_os_map() -> dict[str, str]:
    """Parsed Debian os-release map, values kept verbatim."""
    return {
        "PRETTY_NAME": '"Debian GNU/Linux 11 (bullseye)"',
        "NAME": '"Debian GNU/Linux"',
        "VERSION_ID": '"11"',
        "VERSION": '"11 (bullseye)"',
        "VERSION_CODENAME": "bullseye",
        "ID": "debian",
        "HOME_URL": '"https://www.debian.org/"',
        "SUPPORT_URL": '"https://www.debian.org/support"',
        "BUG_REPORT_URL": '"https://bugs.debian.org/"',
    }


@pytest.fixture
def install_markdown() -> str:
    """Markdown document mixing OS- and context-filtered blocks."""
    return INSTALL_MARKDOWN


@pytest.fixture
def debian_os_release_file(tmp_path: Path) -> Path:
    path = tmp_path / "os-release"
    path.write_text(DEBIAN_OS_RELEASE, encoding="utf-8")
    return path


@pytest.fixture
def fedora_os_release_file(tmp_path: Path) -> Path:
    path = tmp_path / "os-release-fedora"
    path.write_text(FEDORA_OS_RELEASE, encoding="utf-8")
    return path


@pytest.fixture
def install_markdown_file(tmp_path: Path) -> Path:
    path = tmp_path / "INSTALL.md"
    path.write_text(INSTALL_MARKDOWN, encoding="utf-8")
    return path
