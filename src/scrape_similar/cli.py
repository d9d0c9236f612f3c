"""
Command-line access to the extraction engine.

Examples:
  python -m scrape_similar scrape page.html --preset sys-headings
  python -m scrape_similar scrape page.html --config config.json --hide-empty
  python -m scrape_similar guess page.html "/html/body/table/tr[2]/td[1]"
  python -m scrape_similar count page.html "//a[@href]"
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .exceptions import ParserError, ScraperError, SelectorSyntaxError
from .models.config import ScrapeConfig
from .presets import SYSTEM_PRESETS, get_preset
from .scraper import Scraper
from .settings import settings

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SELECTOR_ERROR = 2
EXIT_DATA_ERROR = 65


def _load_scraper(path: str) -> Scraper:
    return Scraper.from_html(Path(path).read_bytes())


def _load_config(args: argparse.Namespace) -> ScrapeConfig:
    if args.preset:
        preset = get_preset(args.preset)
        if preset is None:
            raise ParserError(f"Unknown preset '{args.preset}'")
        return preset.config
    return ScrapeConfig.from_string(Path(args.config).read_text(encoding="utf-8"))


def _print_json(payload) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def cmd_scrape(args: argparse.Namespace) -> int:
    config = _load_config(args).ensure_executable()
    result = _load_scraper(args.file).scrape(config)
    rows = result.rows(hide_empty=args.hide_empty)
    _print_json(
        {
            "columnOrder": result.column_order,
            "data": [row.to_dict() for row in rows],
            "summary": result.summary(),
        }
    )
    return EXIT_OK


def cmd_guess(args: argparse.Namespace) -> int:
    config = _load_scraper(args.file).guess_config_from_selector(args.xpath)
    _print_json(config.to_dict())
    return EXIT_OK


def cmd_count(args: argparse.Namespace) -> int:
    _print_json({"selector": args.selector, "count": _load_scraper(args.file).count(args.selector)})
    return EXIT_OK


def cmd_presets(args: argparse.Namespace) -> int:
    _print_json([{"id": preset.id, "name": preset.name} for preset in SYSTEM_PRESETS])
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scrape-similar",
        description="Extract rows of similar elements from an HTML file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level (default: %(default)s)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    scrape = subparsers.add_parser("scrape", help="Run a scrape config against a file")
    scrape.add_argument("file", help="HTML file to scrape")
    source = scrape.add_mutually_exclusive_group(required=True)
    source.add_argument("--config", help="Path to a ScrapeConfig JSON file")
    source.add_argument("--preset", help="Id of a built-in preset (see `presets`)")
    scrape.add_argument("--hide-empty", action="store_true", help="Leave out rows whose values are all blank")
    scrape.set_defaults(handler=cmd_scrape)

    guess = subparsers.add_parser("guess", help="Guess a config from the first element an XPath matches")
    guess.add_argument("file", help="HTML file")
    guess.add_argument("xpath", help="XPath of the element to start from")
    guess.set_defaults(handler=cmd_guess)

    count = subparsers.add_parser("count", help="Count the matches of a selector")
    count.add_argument("file", help="HTML file")
    count.add_argument("selector", help="XPath expression")
    count.set_defaults(handler=cmd_count)

    presets = subparsers.add_parser("presets", help="List built-in presets")
    presets.set_defaults(handler=cmd_presets)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=args.log_level.upper(), stream=sys.stderr)

    try:
        return args.handler(args)
    except SelectorSyntaxError as e:
        log.error(f"Selector invalid: {e}")
        return EXIT_SELECTOR_ERROR
    except (ParserError, ScraperError, OSError) as e:
        log.error(str(e))
        return EXIT_DATA_ERROR
