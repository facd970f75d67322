"""
discussion_formatter entry point.

Usage:
    python -m discussion_formatter Main.java --theme dark -o main.html
    python -m discussion_formatter --inline --theme tango < post.md
    python -m discussion_formatter --list-themes
    python -m discussion_formatter --set-default-theme vscode-dark
"""

import argparse
import sys


def _read_source(path):
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _write_output(path, html):
    if path is None:
        sys.stdout.write(html)
        if html and not html.endswith("\n"):
            sys.stdout.write("\n")
        return
    with open(path, "w", encoding="utf-8") as f:
        f.write(html)


def main(argv=None):
    """Main entry point for discussion_formatter."""
    parser = argparse.ArgumentParser(
        description="Render Java-like source as syntax-highlighted, inline-styled HTML"
    )
    parser.add_argument(
        "source",
        nargs="?",
        help="Source file to highlight ('-' or omitted reads stdin)"
    )
    parser.add_argument(
        "-t", "--theme",
        default=None,
        help="Theme or palette name (default: the 'theme' setting, else 'default')"
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Write HTML to this file instead of stdout"
    )
    parser.add_argument(
        "--themes-dir",
        default=None,
        help="Directory of external JSON themes (default: the 'themes_dir' setting)"
    )
    parser.add_argument(
        "--inline",
        action="store_true",
        help="Treat input as prose and convert `code` and ```fenced``` snippets"
    )
    parser.add_argument(
        "--list-themes",
        action="store_true",
        help="List built-in palettes and external themes, then exit"
    )
    parser.add_argument(
        "--set-default-theme",
        metavar="NAME",
        help="Persist NAME as the default theme, then exit"
    )
    parser.add_argument(
        "-l", "--loglevel",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: WARNING). DEBUG writes to /tmp/discussion_formatter.log"
    )
    parser.add_argument(
        "--logfile",
        default="/tmp/discussion_formatter.log",
        help="Log file path (default: /tmp/discussion_formatter.log)"
    )
    parser.add_argument(
        "--log-console",
        action="store_true",
        help="Also log to console (stderr)"
    )
    parser.add_argument(
        "--trace-themes",
        action="store_true",
        help="Include per-lookup theme and style debug lines in the log"
    )

    args = parser.parse_args(argv)

    # Setup logging before importing anything else
    from .logging import setup_logging
    setup_logging(
        level=args.loglevel,
        log_file=args.logfile,
        console=args.log_console,
        trace_themes=args.trace_themes,
    )

    from .core.settings import get_setting, set_setting
    from .render.html import highlight
    from .render.inline_code import process
    from .theme import BUNDLED_THEMES_DIR, PALETTES, ThemeLoader

    if args.set_default_theme:
        set_setting("theme", args.set_default_theme)
        print(f"Default theme set to {args.set_default_theme}")
        return 0

    if args.themes_dir:
        loader = ThemeLoader([args.themes_dir, BUNDLED_THEMES_DIR])
    else:
        loader = ThemeLoader.default()

    if args.list_themes:
        print("Built-in palettes:")
        for name in PALETTES.names():
            print(f"  {name}")
        print("External themes:")
        for name in loader.list_available_theme_names():
            print(f"  {name}")
        return 0

    theme_name = args.theme or get_setting("theme")

    try:
        source = _read_source(args.source)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Cannot read {args.source}: {e}", file=sys.stderr)
        return 1

    if args.inline:
        html = process(source, theme_name, loader=loader)
    else:
        html = highlight(source, theme_name, loader=loader)

    try:
        _write_output(args.output, html)
    except OSError as e:
        print(f"Cannot write {args.output}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
