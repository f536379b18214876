#!/usr/bin/env python3
"""
CLI entrypoint for xmi2uml.

Usage:
  python -m app.cli <model.xmi> [flags]

Flags:
  --dialect {xmi21,xmi2013}
  --format {json,yaml}
  -o, --output PATH
  --recover
  --no-diagrams
  --summary
  -v (repeatable)
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import replace
from typing import Any, Dict, List, Optional, TextIO

import yaml

from adapters.sparx import ADAPTERS
from app.config import DEFAULT_CONFIG, ParserConfig
from core.errors import XmiParseError
from core.parser import XmiParser
from core.uml_model import Document, Package
from utils.logging_config import configure_logging, level_from_verbosity
from utils.xml import xml_text

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="xmi2uml", description="Read an Enterprise Architect XMI export into a UML document.")
    ap.add_argument("xmi_path")
    ap.add_argument("--dialect", choices=sorted(ADAPTERS), default=None)
    ap.add_argument("--format", dest="output_format", choices=("json", "yaml"), default=DEFAULT_CONFIG.output_format)
    ap.add_argument("-o", "--output", default=None)
    ap.add_argument("--recover", action="store_true")
    ap.add_argument("--no-diagrams", action="store_true")
    ap.add_argument("--summary", action="store_true")
    ap.add_argument("-v", "--verbose", action="count", default=0)
    return ap


def config_from_args(args: argparse.Namespace, base: ParserConfig = DEFAULT_CONFIG) -> ParserConfig:
    return replace(
        base,
        dialect=args.dialect,
        recover=args.recover or base.recover,
        include_diagrams=base.include_diagrams and not args.no_diagrams,
        output_format=args.output_format,
    )


def dump_document(document: Document, config: ParserConfig, out: TextIO) -> None:
    data: Dict[str, Any] = document.to_dict()
    if config.output_format == "yaml":
        yaml.safe_dump(data, out, sort_keys=False, allow_unicode=True, indent=config.indent)
    else:
        json.dump(data, out, indent=config.indent, ensure_ascii=False)
        out.write("\n")


def summary_lines(document: Document) -> List[str]:
    lines = [f"model {xml_text(document.name)}"]

    def visit(package: Package, depth: int) -> None:
        lines.append(
            f"{'  ' * depth}package {xml_text(package.name)}: "
            f"{len(package.classes)} classes, {len(package.enums)} enums, "
            f"{len(package.data_types)} data types, {len(package.diagrams)} diagrams"
        )
        for child in package.packages:
            visit(child, depth + 1)

    for package in document.packages:
        visit(package, 1)
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    configure_logging(level_from_verbosity(args.verbose))

    if not os.path.isfile(args.xmi_path):
        logger.error("File not found: %s", args.xmi_path)
        return 1

    cfg = config_from_args(args)
    try:
        document = XmiParser(cfg).parse(args.xmi_path)
    except XmiParseError as e:
        logger.error("%s", e)
        return 2

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            if args.summary:
                f.write("\n".join(summary_lines(document)) + "\n")
            else:
                dump_document(document, cfg, f)
        logger.info("Written %s", args.output)
    elif args.summary:
        print("\n".join(summary_lines(document)))
    else:
        dump_document(document, cfg, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
