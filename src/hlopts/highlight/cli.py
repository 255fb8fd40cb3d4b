"""CLI subcommand registration for the /highlight skill."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from hlopts.cli import add_site_arguments, site_config_from_args


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``highlight`` subcommand and its sub-actions."""
    hl = subparsers.add_parser("highlight", help="Render code through a highlight block")
    hl_sub = hl.add_subparsers(dest="action")

    # --- highlight render ---
    rd = hl_sub.add_parser("render", help="Highlight a source file as one tag occurrence")
    rd.add_argument("markup", help='Tag markup, e.g. "python linenos=table"')
    rd.add_argument("file", help="Source file to highlight")
    add_site_arguments(rd)
    rd.add_argument(
        "--safe",
        action="store_true",
        help="Force safe mode (default: the config's 'safe' key)",
    )


def run(args: argparse.Namespace) -> dict[str, Any]:
    """Dispatch to the appropriate highlight action."""
    from hlopts.registry import default_registry

    if args.action == "render":
        config = site_config_from_args(args)
        block = default_registry(config).create(
            "highlight", args.markup, safe=args.safe or config.safe
        )
        code = Path(args.file).read_bytes()
        return {
            "lang": block.lang,
            "options": block.resolve_options(),
            "html": block.render(code),
        }

    return {"error": f"Unknown highlight action: {args.action}"}
