"""CLI subcommand registration for the /options skill."""

from __future__ import annotations

import argparse
from typing import Any

from hlopts.cli import add_site_arguments, site_config_from_args


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``options`` subcommand and its sub-actions."""
    opt = subparsers.add_parser("options", help="Resolve highlight block options")
    opt_sub = opt.add_subparsers(dest="action")

    # --- options site ---
    st = opt_sub.add_parser("site", help="Show the site-wide pygments_options")
    add_site_arguments(st)

    # --- options resolve ---
    rs = opt_sub.add_parser("resolve", help="Resolve the options for one highlight tag")
    rs.add_argument("markup", help='Tag markup, e.g. "ruby linenos"')
    add_site_arguments(rs)
    rs.add_argument(
        "--safe",
        action="store_true",
        help="Force safe mode (default: the config's 'safe' key)",
    )


def run(args: argparse.Namespace) -> dict[str, Any]:
    """Dispatch to the appropriate options action."""
    from hlopts.options import site_options
    from hlopts.registry import default_registry

    config = site_config_from_args(args)

    if args.action == "site":
        return {"pygments_options": dict(site_options(config))}

    if args.action == "resolve":
        block = default_registry(config).create(
            "highlight", args.markup, safe=args.safe or config.safe
        )
        return {
            "lang": block.lang,
            "local_options": block.options,
            "options": block.resolve_options(),
        }

    return {"error": f"Unknown options action: {args.action}"}
