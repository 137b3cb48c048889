"""
Command line entry point.

solar-config SYSTEM [--templates STOCK] [--output OUT] [--strict] [--verbose]

When --templates is given, the stock system is converted first, without
templates, and its resolved bodies become the templates of SYSTEM.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from solar_config.converter import ConverterConfig, SystemConverter
from solar_config.core.errors import ConverterError
from solar_config.core.types import ResolvedSystem
from solar_config.sources.static import StaticSystemSource
from solar_config.templates.registry import TemplateRegistry
from solar_config.writer import dump_system_yaml

logger = logging.getLogger("solar_config")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solar-config",
        description="Resolve a solar system config into an ordered, id assigned body list.",
    )
    parser.add_argument("system", type=Path, help="json or yaml system file")
    parser.add_argument("--templates", type=Path, default=None, help="stock system used as templates")
    parser.add_argument("--output", "-o", type=Path, default=None, help="write yaml here instead of stdout")
    parser.add_argument("--strict", action="store_true", help="fail when any field stays unresolved")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    return parser


def _convert_file(path: Path, templates: TemplateRegistry, config: ConverterConfig) -> ResolvedSystem:
    raw = StaticSystemSource(path=path).load()
    converter = SystemConverter(sun_templates=templates, body_templates=templates, config=config)
    return converter.convert(raw.sun, raw.bodies, sun_name=raw.sun_name)


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = ConverterConfig(strict=args.strict)

    try:
        templates = TemplateRegistry()
        if args.templates is not None:
            stock = _convert_file(args.templates, TemplateRegistry(), ConverterConfig())
            templates = TemplateRegistry.from_system(stock)
            logger.info("loaded %d templates from %s", len(templates), args.templates)

        system = _convert_file(args.system, templates, config)
    except (ConverterError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    text = dump_system_yaml(system, args.output)
    if args.output is None:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
