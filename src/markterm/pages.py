"""Page lookup in a local tldr-style page cache."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TextIO

from markterm.ansi import ColorChoice
from markterm.render import render_file
from markterm.theme import Theme

DEFAULT_CACHE_DIR = Path.home() / ".config" / "tldr-2"

PLATFORMS = (
    "common",
    "android",
    "freebsd",
    "linux",
    "netbsd",
    "openbsd",
    "osx",
    "sunos",
    "windows",
)

_SYS_PLATFORMS = {
    "linux": "linux",
    "darwin": "osx",
    "win32": "windows",
    "cygwin": "windows",
    "sunos5": "sunos",
    "android": "android",
}

RULE_WIDTH = 80


def current_platform() -> str:
    """Map ``sys.platform`` to a page folder name."""
    for prefix in ("freebsd", "netbsd", "openbsd"):
        if sys.platform.startswith(prefix):
            return prefix
    return _SYS_PLATFORMS.get(sys.platform, "linux")


def get_page_location(
    name: str,
    cache_dir: Path,
    platform: str | None = None,
    languages: list[str] | None = None,
) -> tuple[Path, str] | None:
    """Find ``<name>.md`` and return (path, platform folder), or None.

    Languages are tried in order; within each, the requested platform comes
    first, then every known platform folder.
    """
    first = platform or current_platform()
    folders = [first, *PLATFORMS]

    for language in languages or ["en"]:
        language_dir = cache_dir / f"pages.{language}"
        for folder in folders:
            path = language_dir / folder / f"{name}.md"
            if path.is_file():
                return path, folder
    return None


def get_languages(lang: str | None, language: str | None) -> list[str]:
    """Resolve page languages from ``$LANG`` and ``$LANGUAGE``.

    ``$LANGUAGE`` is ignored unless ``$LANG`` is set. English is always last.
    """
    if not lang:
        return ["en"]

    result: list[str] = []
    if language:
        for entry in language.split(":"):
            if entry and entry not in result:
                result.append(entry)

    short = lang[:2]
    if short not in result:
        result.append(short)

    if "en" not in result:
        result.append("en")
    return result


def languages_from_environment() -> list[str]:
    return get_languages(os.environ.get("LANG"), os.environ.get("LANGUAGE"))


def read_page(
    name: str,
    cache_dir: Path,
    theme: Theme,
    *,
    platform: str | None = None,
    languages: list[str] | None = None,
    color: ColorChoice = ColorChoice.ALWAYS,
    file: TextIO | None = None,
) -> bool:
    """Print a page with a short banner. Returns False if no page exists."""
    out = file if file is not None else sys.stdout
    location = get_page_location(name, cache_dir, platform, languages)
    if location is None:
        print(f"Command: {name} not found", file=out)
        return False

    path, folder = location
    print(f"Loaded {name} from platform: {folder}", file=out)
    print("⎯" * RULE_WIDTH, file=out)
    render_file(path, theme, color=color, file=out)
    return True
