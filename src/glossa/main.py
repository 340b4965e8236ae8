"""
Glossa - Entry point.

This module handles:
- Argument parsing
- Logging setup
- Building the translation system from glossa.yaml
- Inspection commands (langs, t, dump, coverage)
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import yaml

from glossa import __version__
from glossa.core.config import SiteConfig, find_config_file
from glossa.exceptions import TranslationError
from glossa.i18n.builtin import REFERENCE_LANG, builtin_languages, load_builtin_dictionaries, missing_keys
from glossa.i18n.system import TranslationSystem, load_translation_system

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="glossa",
        description="Glossa - translation resolution for documentation sites",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Glossa {__version__}",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: auto-detect)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("langs", help="List configured languages and their text direction")

    lookup = commands.add_parser("t", help="Translate one key")
    lookup.add_argument("key", help="Translation key, e.g. search.label")
    lookup.add_argument("--lang", default=None, help="Language tag (default: site default)")
    lookup.add_argument(
        "--set",
        dest="options",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Placeholder value, may be repeated",
    )

    dump = commands.add_parser("dump", help="Print the effective dictionary of a language")
    dump.add_argument("--lang", default=None, help="Language tag (default: site default)")

    commands.add_parser("coverage", help="Report built-in dictionary coverage")

    return parser.parse_args(argv)


def parse_options(pairs: list[str]) -> dict[str, str]:
    """Turn ["name=Ana", ...] into {"name": "Ana", ...}."""
    options: dict[str, str] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise ValueError(f"Expected NAME=VALUE, got {pair!r}")
        options[name] = value
    return options


def build_system(config: SiteConfig) -> TranslationSystem:
    """Build the translation system described by a site configuration."""
    return asyncio.run(
        load_translation_system(
            config.i18n,
            config.translations_dir(),
            config.plugin_translations().as_dict(),
        )
    )


def cmd_langs(system: TranslationSystem) -> int:
    for lang in system.languages:
        marker = " (default)" if lang == system.default_lang else ""
        print(f"{lang}\t{system.translator_for(lang).dir()}{marker}")
    return 0


def cmd_translate(system: TranslationSystem, key: str, lang: str | None, pairs: list[str]) -> int:
    try:
        options = parse_options(pairs)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(system.translator_for(lang).t(key, options or None))
    return 0


def cmd_dump(system: TranslationSystem, lang: str | None) -> int:
    dictionary = dict(system.translator_for(lang).all())
    print(yaml.safe_dump(dictionary, allow_unicode=True, sort_keys=True), end="")
    return 0


def cmd_coverage() -> int:
    total = len(load_builtin_dictionaries()[REFERENCE_LANG])
    for lang in builtin_languages():
        missing = missing_keys(lang)
        print(f"{lang}\t{total - len(missing)}/{total}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Application entry point.

    Returns:
        Exit code (0 = success)
    """
    args = parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s]: %(message)s",
    )

    if args.command == "coverage":
        return cmd_coverage()

    try:
        config_path = find_config_file(args.config)
        config = SiteConfig.from_file(config_path)
        if not args.debug:
            logging.getLogger().setLevel(config.advanced.log_level.upper())
        logger.debug(f"Using config: {config_path}")
        system = build_system(config)
    except TranslationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command == "langs":
        return cmd_langs(system)
    if args.command == "t":
        return cmd_translate(system, args.key, args.lang, args.options)
    return cmd_dump(system, args.lang)


if __name__ == "__main__":
    sys.exit(main())
