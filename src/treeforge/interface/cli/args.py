from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema (help messages, flags and defaults) and
translates the parsed namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from treeforge.domain.constants import APP_NAME
from treeforge.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treeforge CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=i18n.t("app.description"),
    )

    # --- Input and Target ---
    p.add_argument(
        "-i", "--input",
        dest="input_file",
        default=None,
        help=i18n.t("cli.args.input"),
    )
    p.add_argument(
        "--parent",
        dest="parent_dir",
        default=None,
        help=i18n.t("cli.args.parent"),
    )
    p.add_argument(
        "--root-name",
        dest="root_name",
        default=None,
        help=i18n.t("cli.args.root_name"),
    )

    # --- Execution Mode ---
    p.add_argument("--apply", action="store_true", help=i18n.t("cli.args.apply"))
    p.add_argument("--force", action="store_true", help=i18n.t("cli.args.force"))

    # --- Output ---
    p.add_argument("-v", "--verbose", action="store_true", help=i18n.t("cli.args.verbose"))
    p.add_argument("--json", dest="json_output", action="store_true", help=i18n.t("cli.args.json"))
    p.add_argument("--version", action="store_true", help=i18n.t("cli.args.version"))

    # --- Configuration and Diagnostics ---
    p.add_argument("--use-defaults", action="store_true", help=i18n.t("cli.args.defaults"))
    p.add_argument("--save-config", action="store_true", help=i18n.t("cli.args.save_config"))
    p.add_argument("--dump-config", action="store_true", help=i18n.t("cli.args.dump"))
    p.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const="",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Boolean flags only override when set, so persisted defaults survive
    an invocation that does not mention them.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "parent_dir": args.parent_dir,
        "root_name": args.root_name,
    }

    if args.apply:
        overrides["apply"] = True
    if args.force:
        overrides["force"] = True
    if args.verbose:
        overrides["verbose"] = True
    if args.json_output:
        overrides["json_output"] = True

    return overrides
