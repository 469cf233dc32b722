"""Command-line entry point for the store-level commands."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from shelfbox.configkeys import explain
from shelfbox.jsonfile import StoreError
from shelfbox.maintenance import (
    find_stale,
    human_bytes,
    remove_stale,
    store_info,
    verify,
)


def default_store() -> Path:
    """Store location from ``SHELFBOX_STORE`` or the XDG data directory."""
    env = os.environ.get("SHELFBOX_STORE")
    if env:
        return Path(env)
    xdg = os.environ.get("XDG_DATA_HOME")
    base = Path(xdg) if xdg and Path(xdg).is_absolute() else Path.home() / ".local" / "share"
    return base / "shelfbox"


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--store",
        type=Path,
        metavar="PATH",
        default=argparse.SUPPRESS,
        help="Override the store directory.",
    )

    parser = argparse.ArgumentParser(
        prog="shelfbox",
        description="Shelve repo-local files outside Git, keeping them visible in your editor.",
    )
    parser.add_argument(
        "--store",
        type=Path,
        metavar="PATH",
        default=None,
        help="Override the store directory.",
    )
    groups = parser.add_subparsers(dest="group", required=True)

    store = groups.add_parser("store", help="Manage the global store.", parents=[common])
    store_cmds = store.add_subparsers(dest="command", required=True)
    store_cmds.add_parser(
        "info", parents=[common], help="Show store metadata (path, repo count, disk usage)."
    )
    store_cmds.add_parser(
        "verify", parents=[common], help="Run a deep integrity check across all store contents."
    )
    gc = store_cmds.add_parser(
        "gc", parents=[common], help="Delete store entries for repositories that no longer exist."
    )
    gc.add_argument("--dry-run", action="store_true", help="Print what would be deleted.")
    gc.add_argument("--yes", action="store_true", help="Perform deletions immediately.")

    config = groups.add_parser("config", help="Manage shelfbox configuration.", parents=[common])
    config_cmds = config.add_subparsers(dest="command", required=True)
    explain_cmd = config_cmds.add_parser(
        "explain", parents=[common], help="Show detailed information about a configuration key."
    )
    explain_cmd.add_argument("key", metavar="KEY")
    return parser


def _store_info(store: Path) -> int:
    summary = store_info(store)
    print(f"Store path  : {summary.store}")
    print(f"Repositories: {summary.repo_count}")
    print(f"Total items : {summary.total_items}")
    print(f"Disk usage  : {human_bytes(summary.disk_bytes)}")
    return 0


def _store_verify(store: Path) -> int:
    issues = verify(store)
    for issue in issues:
        print(issue, file=sys.stderr)
    if not issues:
        print("OK — no issues found.")
        return 0
    print(f"{len(issues)} issue(s) found. Run `shelfbox repo repair` to fix.")
    return 2


def _store_gc(store: Path, dry_run: bool, yes: bool) -> int:
    stale = find_stale(store)
    if not stale:
        print("Nothing to clean up.")
        return 0
    print(f"Stale entries ({len(stale)}):")
    for entry in stale:
        print(f"  {entry.root} ({entry.store_dir})")
    if dry_run:
        print("Dry run — no changes made.")
        return 0
    if not yes:
        print("Run with --yes to remove these entries.")
        return 0
    for entry in remove_stale(store, stale):
        print(f"Removed: {entry.root}")
    print("Done.")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.group == "config":
            print(explain(args.key))
            return 0
        store = args.store if args.store is not None else default_store()
        if args.command == "info":
            return _store_info(store)
        if args.command == "verify":
            return _store_verify(store)
        return _store_gc(store, args.dry_run, args.yes)
    except (StoreError, ValueError, OSError) as err:
        print(f"error: {err}", file=sys.stderr)
        return 255


if __name__ == "__main__":
    sys.exit(main())