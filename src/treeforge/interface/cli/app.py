from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration resolution
(defaults, persisted state and flags), reading the tree text, parsing it and
either previewing or materializing the structure.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional, Sequence

from treeforge.core.parsing.tree_parser import parse_tree
from treeforge.core.services.reader import read_input
from treeforge.core.services.scaffolder import (
    apply_entries,
    determine_root_name,
    format_entry_line,
    render_dry_run,
)
from treeforge.core.services.validator import validate_config
from treeforge.domain.config import get_default_config, load_config, save_config
from treeforge.domain.constants import APP_VERSION, DEFAULT_PARENT_DIR
from treeforge.domain.errors import ScaffoldError, TreeParseError
from treeforge.domain.scaffold_models import EntryOutcome, ScaffoldResult
from treeforge.domain.tree_models import Entry
from treeforge.infra.fs import normalize_path
from treeforge.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from treeforge.interface.cli import args as cli_args
from treeforge.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(i18n.t("app.version", version=APP_VERSION))
        return 0

    # 2. Logging bootstrap (console stderr, optional file)
    # A bare --log-file selects the default location in the user data directory
    log_file = get_default_log_path() if args.log_file == "" else args.log_file
    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=log_file))
    logger.debug("CLI execution initiated. Resolving configuration...")

    # 3. Configuration hierarchy
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config:
        save_config(conf)
        logger.info(i18n.t("cli.status.config_saved"))

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return 0

    try:
        return _run(conf, args.input_file)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return 130

# -----------------------------------------------------------------------------
# EXECUTION
# -----------------------------------------------------------------------------

def _run(conf: Dict[str, Any], input_file: Optional[str]) -> int:
    """Read, parse and preview or apply. Returns the exit code."""
    verbose = conf["verbose"]
    say = _status_printer(verbose, conf["json_output"])

    # 1. Input acquisition
    if input_file:
        say(i18n.t("cli.status.reading_file", path=input_file))
    else:
        say(i18n.t("cli.status.reading_stdin"))
    try:
        lines = read_input(input_file)
    except OSError as e:
        return _fail(i18n.t("cli.errors.read", error=str(e)))

    if not lines:
        return _fail(i18n.t("cli.errors.empty_input"))
    say(i18n.t("cli.status.read_lines", count=len(lines)))

    # 2. Parsing
    try:
        entries = parse_tree(lines)
    except TreeParseError as e:
        return _fail(i18n.t("cli.errors.parse", error=str(e)))
    say(i18n.t("cli.status.parsed", count=len(entries)))

    root = determine_root_name(conf["root_name"], lines[0])
    base_path = os.path.join(normalize_path(conf["parent_dir"], DEFAULT_PARENT_DIR), root)

    # 3a. Dry-run
    if not conf["apply"]:
        if conf["json_output"]:
            _print_json(root, base_path, entries)
        else:
            print("\n".join(render_dry_run(base_path, entries)))
        return 0

    # 3b. Apply
    say(i18n.t("cli.status.creating", path=base_path))

    def progress(entry: Entry, outcome: EntryOutcome, full_path: str) -> None:
        if outcome is EntryOutcome.SKIPPED:
            say(i18n.t("cli.status.skip", path=full_path))
        else:
            say(format_entry_line(entry, full_path))

    try:
        result = apply_entries(base_path, entries, force=conf["force"], progress=progress)
    except ScaffoldError as e:
        logger.debug("Scaffold aborted", exc_info=True)
        return _fail(i18n.t("cli.errors.scaffold", error=str(e)))

    if conf["json_output"]:
        _print_json(root, base_path, entries, result)
    else:
        _print_human_summary(result)
    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-null overrides into the base configuration.

    Only keys known to the base configuration are merged.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _status_printer(verbose: bool, json_output: bool):
    """Return a printer for verbose status lines; stderr when stdout carries JSON."""
    stream = sys.stderr if json_output else sys.stdout

    def say(msg: str) -> None:
        if verbose:
            print(msg, file=stream)

    return say


def _fail(msg: str) -> int:
    logger.debug(msg)
    print(f"ERROR: {msg}", file=sys.stderr)
    return 1


def _print_human_summary(result: ScaffoldResult) -> None:
    print()
    print(i18n.t("cli.status.done", created=result.created, skipped=result.skipped))


def _print_json(
        root: str,
        base_path: str,
        entries: Sequence[Entry],
        result: Optional[ScaffoldResult] = None,
) -> None:
    payload: Dict[str, Any] = {
        "root": root,
        "base_path": base_path,
        "entries": [e.to_dict() for e in entries],
    }
    if result is not None:
        payload["result"] = result.to_dict()
    print(json.dumps(payload, ensure_ascii=False, indent=2))

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
