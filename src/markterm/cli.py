"""Command-line interface for markterm."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from markterm import __version__
from markterm.ansi import ColorChoice
from markterm.errors import ThemeError
from markterm.pages import DEFAULT_CACHE_DIR, languages_from_environment
from markterm.theme import Theme, get_default_theme, theme_from_config

CONFIG_NAME = "markterm.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input: str
    page: bool
    theme: Theme
    color: ColorChoice
    cache_dir: Path
    platform: str | None
    languages: list[str]
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="markterm",
        description="Render reference-page markdown on the terminal",
    )
    p.add_argument("input", help="Markdown file, '-' for stdin, or a command name with --page")
    p.add_argument(
        "--page",
        action="store_true",
        help="Treat INPUT as a command name and look its page up in the cache",
    )
    p.add_argument("-p", "--platform", metavar="NAME", help="Platform to look in first")
    p.add_argument(
        "-L",
        "--language",
        action="append",
        default=[],
        metavar="LANG",
        help="Page language, in order of preference (repeatable)",
    )
    p.add_argument(
        "--cache-dir",
        metavar="DIR",
        help=f"Page cache directory (default: {DEFAULT_CACHE_DIR})",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument(
        "--color",
        choices=[c.value for c in ColorChoice],
        default=None,
        help="When to emit escape sequences (default: auto)",
    )
    p.add_argument("--debug", action="store_true", help="Dump line classification to stderr")
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return p


def parse_color_choice(s: str) -> ColorChoice:
    """Parse an auto/always/never string into a ColorChoice."""
    try:
        return ColorChoice(s.lower())
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid color choice (expected auto, always or never): {s}"
        ) from None


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def _search_dir(args: argparse.Namespace) -> Path:
    if not args.page and args.input != "-":
        parent = Path(args.input).parent
        if parent.parts:
            return parent
    return Path(".")


def config_location(args: argparse.Namespace) -> Path:
    """Return the config file named by --config, or the one discovered beside INPUT."""
    if args.config:
        return Path(args.config)
    return _search_dir(args) / CONFIG_NAME


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, _search_dir(args))

    # Theme: default < config
    theme = get_default_theme()
    cfg_theme = config.get("theme")
    if cfg_theme is not None:
        if not isinstance(cfg_theme, dict):
            raise ThemeError("'theme' must be a table", "theme")
        theme = theme_from_config(cfg_theme, theme)

    # Color choice: config < CLI
    color = ColorChoice.AUTO
    cfg_color = config.get("color")
    if isinstance(cfg_color, str):
        color = parse_color_choice(cfg_color)
    if args.color is not None:
        color = parse_color_choice(args.color)

    # Page lookup: config < CLI, environment when neither names languages
    cache_dir = DEFAULT_CACHE_DIR
    platform: str | None = None
    languages: list[str] = []
    cfg_pages = config.get("pages")
    if isinstance(cfg_pages, dict):
        cfg_cache = cfg_pages.get("cache_dir")
        if isinstance(cfg_cache, str):
            cache_dir = Path(cfg_cache).expanduser()
        cfg_platform = cfg_pages.get("platform")
        if isinstance(cfg_platform, str):
            platform = cfg_platform
        cfg_langs = cfg_pages.get("languages")
        if isinstance(cfg_langs, list):
            languages = [str(lang) for lang in cfg_langs]
    if args.cache_dir:
        cache_dir = Path(args.cache_dir).expanduser()
    if args.platform:
        platform = args.platform
    if args.language:
        languages = list(args.language)
    if not languages:
        languages = languages_from_environment()

    return CliOptions(
        input=args.input,
        page=args.page,
        theme=theme,
        color=color,
        cache_dir=cache_dir,
        platform=platform,
        languages=languages,
        debug=args.debug,
    )


def render_input(options: CliOptions, file: TextIO | None = None) -> bool:
    """Render the file, stdin, or cached page named by *options*.

    Returns False when a page lookup finds nothing. I/O errors propagate.
    """
    from markterm.debug import dump_lines
    from markterm.pages import read_page
    from markterm.render import render, render_file, split_lines

    if options.page:
        return read_page(
            options.input,
            options.cache_dir,
            options.theme,
            platform=options.platform,
            languages=options.languages,
            color=options.color,
            file=file,
        )

    if options.input == "-":
        source = sys.stdin.read()
    elif options.debug:
        # Read once; the dump and the render share the same text
        with open(options.input, encoding="utf-8", newline="\n") as f:
            source = f.read()
    else:
        render_file(options.input, options.theme, color=options.color, file=file)
        return True

    if options.debug:
        dump_lines(split_lines(source), options.theme)
    render(source, options.theme, color=options.color, file=file)
    return True


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ThemeError as exc:
        print(exc.format(str(config_location(args))), file=sys.stderr)
        return 2
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config file: {exc}", file=sys.stderr)
        return 2

    try:
        found = render_input(options)
    except OSError as exc:
        print(f"error: cannot read {options.input}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as exc:
        print(f"error: cannot decode {options.input}: {exc}", file=sys.stderr)
        return 1

    return 0 if found else 1
