#!/usr/bin/env python3
"""Command-line front-end: format, unformat and compare numbers."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import fields
from pathlib import Path
from typing import List, Optional

from .core.constants import DEFAULT_DECIMALS
from .core.datatypes import FormatMeta
from .core.exc import (
    FormatConfigError,
    MalformedNumber,
    NotUsable,
    UnformattableInput,
    UnknownScheme,
)
from .registry import FormatRegistry, RegistrySettings

EXIT_OK = 0
EXIT_INPUT_ERROR = 2


def load_settings(path: Optional[str]) -> RegistrySettings:
    """Read RegistrySettings from a JSON file (unknown keys are rejected)."""
    if path is None:
        return RegistrySettings()
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise FormatConfigError(f"{path}: expected a JSON object")
    known = {f.name for f in fields(RegistrySettings)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise FormatConfigError(f"{path}: unknown settings {unknown}")
    if "format_list" in raw:
        raw["format_list"] = tuple(raw["format_list"])
    return RegistrySettings(**raw)


def _apply_overrides(settings: RegistrySettings, args: argparse.Namespace) -> RegistrySettings:
    values = {f.name: getattr(settings, f.name) for f in fields(RegistrySettings)}
    if args.formats:
        values["format_list"] = tuple(s.strip() for s in args.formats.split(",") if s.strip())
    if args.default:
        values["default_format"] = args.default
    if args.current:
        values["current_format"] = args.current
    if args.decimal_separator:
        values["decimal_separator"] = args.decimal_separator
    if args.thousand_separator:
        values["thousand_separator"] = args.thousand_separator
    return RegistrySettings(**values)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="number-format", description="Format, unformat and compare decimal numbers.")
    p.add_argument("--config", default=None, help="JSON file with registry settings")
    p.add_argument("--formats", default=None, help="Comma-separated scheme names to register")
    p.add_argument("--default", default=None, help="Default scheme name")
    p.add_argument("--current", default=None, help="Current scheme name")
    p.add_argument("--decimal-separator", default=None)
    p.add_argument("--thousand-separator", default=None)

    sub = p.add_subparsers(dest="command", required=True)

    f = sub.add_parser("format", help="Format a decimal number")
    f.add_argument("number")
    f.add_argument("--decimals", type=int, default=DEFAULT_DECIMALS)
    f.add_argument("--scheme", default=None)
    f.add_argument("--rich", action="store_true", help="Render rich markup instead of plain text")
    f.add_argument("--meta", action="store_true", help="Print metadata as JSON")

    u = sub.add_parser("unformat", help="Parse formatted text back to a canonical decimal")
    u.add_argument("text")
    u.add_argument("--scheme", default=None)

    c = sub.add_parser("compare", help="Tiered comparison of two numbers (-3..3)")
    c.add_argument("first")
    c.add_argument("second")
    c.add_argument("--scheme", default=None)

    t = sub.add_parser("type", help="Scheme whose suffix applies to a number")
    t.add_argument("number")
    t.add_argument("--decimals", type=int, default=DEFAULT_DECIMALS)
    t.add_argument("--scheme", default=None)
    return p


def run(args: argparse.Namespace) -> str:
    settings = _apply_overrides(load_settings(args.config), args)
    registry = FormatRegistry.from_settings(settings)

    if args.command == "format":
        result = registry.format(
            args.number,
            rich=args.rich,
            decimals=args.decimals,
            meta_only=args.meta,
            has_context_menu=False,
            scheme=args.scheme,
        )
        if isinstance(result, FormatMeta):
            return json.dumps(result.as_dict(), ensure_ascii=False)
        return result
    if args.command == "unformat":
        return registry.unformat(args.text, scheme=args.scheme)
    if args.command == "compare":
        return str(registry.compare(args.first, args.second, scheme=args.scheme))
    return registry.get_type_by_value(args.number, args.decimals, scheme=args.scheme)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        print(run(args))
    except (MalformedNumber, UnformattableInput, NotUsable, UnknownScheme, FormatConfigError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
