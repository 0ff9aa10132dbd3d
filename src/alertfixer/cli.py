"""
Command-line interface for AlertFixer.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import LOG_LEVELS, UNTERMINATED_POLICIES, EditorConfig, load_config
from .errors import AlertFixerError
from .migration import alerts as alert_migration
from .version import __version__


def build_cli_parser() -> argparse.ArgumentParser:
    cli = argparse.ArgumentParser(prog="alertfixer", description="Rewrite UIAlertView calls to UIAlertController")
    cli.add_argument(
        "--version",
        action="version",
        version=f"AlertFixer {__version__} (Python {sys.version.split()[0]})",
    )
    cli.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: ALERTFIXER_LOG_LEVEL or WARNING)",
    )
    sub = cli.add_subparsers(dest="command", required=True)

    migrate_cmd = sub.add_parser("migrate", help="Migration helpers")
    migrate_sub = migrate_cmd.add_subparsers(dest="migrate_command", required=True)
    migrate_alerts_cmd = migrate_sub.add_parser(
        "alerts",
        help="Rewrite [UIAlertView showWithTitle:...] calls to [UIAlertController showAlertInViewController:...].",
    )
    migrate_alerts_cmd.add_argument(
        "paths", nargs="*", type=Path, help="Files or directories containing Objective-C sources (defaults to current directory)"
    )
    migrate_alerts_cmd.add_argument("--write", action="store_true", help="Apply changes in place")
    migrate_alerts_cmd.add_argument("--no-backup", action="store_true", help="Skip writing .bak backups when --write is used")
    migrate_alerts_cmd.add_argument(
        "--on-unterminated",
        choices=UNTERMINATED_POLICIES,
        default=None,
        help="What to do when a tap block has no matching '}];' line (default: skip)",
    )

    check_cmd = sub.add_parser("check", help="List legacy UIAlertView calls without changing anything")
    check_cmd.add_argument("paths", nargs="*", type=Path, help="Files or directories to scan (defaults to current directory)")

    serve_cmd = sub.add_parser("serve", help="Run the migration HTTP API")
    serve_cmd.add_argument("--host", default="127.0.0.1")
    serve_cmd.add_argument("--port", type=int, default=8000)
    return cli


def _collect_targets(paths: list[Path], extensions: list[str]) -> list[Path]:
    targets: list[Path] = []
    for target in paths or [Path(".")]:
        if not target.exists():
            print(f"Path '{target}' does not exist.", file=sys.stderr)
            continue
        targets.extend(alert_migration.iter_source_files(target, extensions))
    return targets


def main(argv: list[str] | None = None) -> int:
    cli = build_cli_parser()
    args = cli.parse_args(argv)
    try:
        config = load_config()
    except AlertFixerError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    logging.basicConfig(level=(args.log_level or config.log_level).upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "migrate":
        if args.migrate_command == "alerts":
            editor_config = config.editor
            if args.on_unterminated:
                editor_config = EditorConfig(on_unterminated=args.on_unterminated)
            backup = config.backup and not args.no_backup
            results = []
            for target in _collect_targets(args.paths, config.extensions):
                try:
                    results.append(
                        alert_migration.migrate_file(target, write=args.write, backup=backup, config=editor_config)
                    )
                except AlertFixerError as exc:
                    print(f"- {target}: {exc}", file=sys.stderr)
                    return 1
            changed = sum(1 for r in results if r.changed)
            inline_total = sum(r.inline_rewrites for r in results)
            block_total = sum(r.block_rewrites for r in results)
            if args.write:
                print(f"Migrated {changed} file(s). Inline: {inline_total}, with tap block: {block_total}.")
            else:
                print("Dry run. Re-run with --write to apply changes.")
                for r in results:
                    if r.changed:
                        print(f"- {r.path}: inline={r.inline_rewrites}, tap_block={r.block_rewrites}")
            for r in results:
                for detail in r.details:
                    print(f"- {r.path}: {detail}")
                for warning in r.warnings:
                    print(f"- {r.path}: {warning}")
            return 0
        print("Unknown migrate subcommand", file=sys.stderr)
        return 2

    if args.command == "check":
        found = 0
        for target in _collect_targets(args.paths, config.extensions):
            source = target.read_text(encoding="utf-8")
            for line_no in alert_migration.find_legacy_alerts(source):
                print(f"{target}:{line_no}: legacy UIAlertView call")
                found += 1
        if found:
            print(f"Found {found} legacy alert call(s).")
            return 1
        print("No legacy alert calls found.")
        return 0

    if args.command == "serve":
        import uvicorn

        from .server import create_app

        uvicorn.run(create_app(config=config), host=args.host, port=args.port, log_level=config.log_level.lower())
        return 0

    print(f"Unknown command {args.command}", file=sys.stderr)
    return 2


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
