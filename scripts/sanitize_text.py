#!/usr/bin/env python3
"""
Sanitize Text Script.

Runs the editable-surface sanitizer over a file or stdin using the rules
file defaults, with optional per-run overrides.

Usage:
    python scripts/sanitize_text.py notes.txt              # Sanitize a file
    echo "foo  bar" | python scripts/sanitize_text.py      # Sanitize stdin
    python scripts/sanitize_text.py --multi-line notes.txt # Keep paragraphs
    python scripts/sanitize_text.py --max-length 80 -      # Truncate
    python scripts/sanitize_text.py --check notes.txt      # Exit 1 if dirty
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from sane_editable.adapters.rules import EditorRulesAdapter
from sane_editable.components.sanitizer import (
    CheckTextInput,
    SanitizeTextInput,
    run_check,
    run_sanitize,
)
from sane_editable.rules.loader import default_rules, load_rules, resolve_rules_path

logger = logging.getLogger("sanitize_text")


def read_source(source: str) -> str:
    """
    Read text from a path, or stdin when source is '-'.

    A single trailing line ending is dropped.
    """
    if source == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sanitize editable-surface text")
    parser.add_argument("source", nargs="?", default="-", help="File to read ('-' for stdin)")
    parser.add_argument("--rules", type=Path, default=None, help="Rules file path")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--multi-line", dest="multi_line", action="store_true", default=None)
    mode.add_argument("--single-line", dest="multi_line", action="store_false")
    parser.add_argument("--max-length", type=int, default=None)
    parser.add_argument(
        "--no-sanitise",
        dest="sanitise",
        action="store_false",
        default=None,
        help="Only apply max-length truncation",
    )
    parser.add_argument("--check", action="store_true", help="Exit 1 if input is not clean")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    rules_path = resolve_rules_path(args.rules)
    if rules_path.exists():
        rules = load_rules(rules_path)
    else:
        logger.info("No rules file at %s, using defaults", rules_path)
        rules = default_rules()
    adapter = EditorRulesAdapter(rules)

    text = read_source(args.source)

    if args.check:
        result = run_check(
            CheckTextInput(
                text=text,
                multi_line=args.multi_line,
                max_length=args.max_length,
                sanitise=args.sanitise,
            ),
            rules=adapter,
        )
        print("clean" if result.is_clean else "dirty")
        return 0 if result.is_clean else 1

    output = run_sanitize(
        SanitizeTextInput(
            text=text,
            multi_line=args.multi_line,
            max_length=args.max_length,
            sanitise=args.sanitise,
        ),
        rules=adapter,
    )
    sys.stdout.write(output.text + "\n")
    if output.truncated:
        logger.warning("Output truncated to %d characters", len(output.text))
    return 0


if __name__ == "__main__":
    sys.exit(main())
