"""CLI entry point for hlopts."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from hlopts.config import SiteConfig, load_site_config
from hlopts.errors import ConfigError, HighlightOptionError, HighlightSyntaxError


def add_site_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the options that locate the site configuration."""
    parser.add_argument(
        "--source",
        default=".",
        help="Site source directory holding _config.yml (default: .)",
    )
    parser.add_argument(
        "--config",
        action="append",
        default=None,
        help="Configuration file(s); repeat or comma-separate, later files win",
    )


def site_config_from_args(args: argparse.Namespace) -> SiteConfig:
    files = None
    if args.config is not None:
        files = [f.strip() for value in args.config for f in value.split(",") if f.strip()]
    return load_site_config(args.source, files)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hlopts",
        description="Site-wide Pygments options for highlight blocks",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log debug output to stderr"
    )
    sub = parser.add_subparsers(dest="command")

    # --- Register skill subcommands ---
    from hlopts.options.cli import register as register_options
    from hlopts.highlight.cli import register as register_highlight

    register_options(sub)
    register_highlight(sub)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    skill_dispatch = {
        "options": "hlopts.options.cli",
        "highlight": "hlopts.highlight.cli",
    }

    if args.command in skill_dispatch:
        # Check if action was provided
        if not getattr(args, "action", None):
            # Re-parse to show skill-specific help
            parser.parse_args([args.command, "--help"])
            return 1

        import importlib
        cli_mod = importlib.import_module(skill_dispatch[args.command])
        try:
            result = cli_mod.run(args)
        except (ConfigError, HighlightSyntaxError, HighlightOptionError, OSError) as exc:
            json.dump({"error": str(exc)}, sys.stdout, indent=2)
            print()
            return 2
        json.dump(result, sys.stdout, indent=2)
        print()
        return 0

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
