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

"""Command-line interface for mdshell."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from .. import __version__
from ..config.config import Config, parse_context
from ..config.constants import MdShellConstants
from ..core.exceptions import DocumentLoadError, MdShellError
from ..core.extractor import extract_commands
from ..core.os_release import read_os_release
from ..core.prompts import strip_prompts

logger = logging.getLogger("mdshell.cli")


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr; stdout carries only extracted commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load_config(args: argparse.Namespace) -> Config:
    """Build the effective config from ``--config`` and CLI flags."""
    config = Config.from_file(args.config) if args.config else Config()
    if args.config:
        logger.info("Using config file: %s", args.config)

    return config.merge(
        strict_os_release=args.strict_os_release,
        unquote_os_values=args.unquote,
        strip_prompts=args.strip_prompts,
        context=parse_context(args.context) if args.context is not None else None,
    )


def _read_markdown(path: str) -> str:
    """Read the whole Markdown document; ``-`` reads stdin."""
    try:
        if path == "-":
            return sys.stdin.read()
        with open(path, encoding="utf-8") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Failed to read markdown file {path}: {e}") from e


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def extract_command(args: argparse.Namespace, config: Config) -> int:
    """Extract the selected command blocks to stdout."""
    markdown = _read_markdown(args.markdown)
    os_map = read_os_release(
        args.os_release,
        strict=config.strict_os_release,
        unquote=config.unquote_os_values,
    )
    logger.debug("Context tags: %s", ", ".join(sorted(config.context)) or "(none)")

    chunks = extract_commands(markdown, os_map, config.context)
    if config.strip_prompts:
        chunks = strip_prompts(chunks)

    try:
        for chunk in chunks:
            sys.stdout.write(chunk)
        sys.stdout.flush()
    except BrokenPipeError:
        # Reader went away (e.g. piped into head); silence the flush at exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 1
    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdshell",
        description="Extract shell commands from the fenced code blocks of a Markdown document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Fence syntax:
  ```sh                          always extracted
  ```sh:ID=debian ID=fedora      any KEY=VALUE matches os-release
  ```sh:git,sev;                 any tag is in <context>
  ```sh:git;ID=debian            both of the above

Examples:
  mdshell README.md {MdShellConstants.DEFAULT_OS_RELEASE_PATH} | sh -e
  mdshell README.md {MdShellConstants.DEFAULT_OS_RELEASE_PATH} git,sev
  mdshell --strip-prompts --unquote docs/install.md {MdShellConstants.DEFAULT_OS_RELEASE_PATH}
        """,
    )
    parser.add_argument("markdown", help="Path to the Markdown document ('-' for stdin)")
    parser.add_argument("os_release", help="Path to an os-release file")
    parser.add_argument("context", nargs="?", default=None, help="Comma-separated context tags, e.g. git,sev")
    parser.add_argument(
        "--lenient",
        dest="strict_os_release",
        action="store_false",
        default=None,
        help="Skip os-release lines without '=' instead of failing",
    )
    parser.add_argument(
        "--unquote",
        action="store_true",
        default=None,
        help="Strip surrounding quotes from os-release values before matching",
    )
    parser.add_argument(
        "--strip-prompts",
        action="store_true",
        default=None,
        help="Remove leading '$', '#' and '|' prompts and drop blank lines",
    )
    parser.add_argument("--config", metavar="PATH", help="YAML file with default options")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log block selection decisions to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = _load_config(args)
        return extract_command(args, config)
    except MdShellError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
