"""CLI entrypoint for ghqperms."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ghqperms import __version__
from ghqperms.config import load_config
from ghqperms.constants.branding import BRAND_NAME, CLI_DESCRIPTION
from ghqperms.constants.reporting import MODE_DENY, OUTPUT_FORMAT_JSON
from ghqperms.exceptions import ConfigError, ExternalToolError
from ghqperms.reporting.diagnostics import log_scan_diagnostics
from ghqperms.reporting.render import render_scan
from ghqperms.scanner.orchestrator import scan_settings
from ghqperms.scanner.root import command_helper, resolve_root


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=BRAND_NAME,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-g",
        "--ghq-root",
        type=Path,
        default=None,
        help="Scan this directory instead of asking `ghq root`",
    )
    parser.add_argument("--json", action="store_true", help="Print a JSON document instead of one entry per line")
    parser.add_argument("--deny", action="store_true", help="Report denied entries instead of allowed entries")
    parser.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=None,
        help="Number of threads used to parse settings files (default: 1)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped files and scan counts to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    jobs = args.jobs if args.jobs is not None else config.jobs
    if jobs < 1:
        print(f"Configuration error: --jobs must be a positive integer, got {jobs}", file=sys.stderr)
        return 2

    output_format = OUTPUT_FORMAT_JSON if args.json else config.output_format
    mode = MODE_DENY if args.deny else config.mode
    override = args.ghq_root if args.ghq_root is not None else config.ghq_root

    try:
        root = resolve_root(override, helper=command_helper(config.helper_command))
    except ExternalToolError as exc:
        print(f"Failed to determine ghq root directory: {exc}", file=sys.stderr)
        return 1

    scan = scan_settings(root, jobs=jobs)

    if args.verbose:
        log_scan_diagnostics(scan)

    output = render_scan(scan, mode, output_format)
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
