from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema (global options plus the `map`,
`render` and `laws` sub-commands) and translates parsed namespaces into
configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from functorkit.core.catalog import available_functions

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the functorkit CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="functorkit",
        description="Map functions over binary trees and check the functor laws.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Path to a JSON config file (defaults to $FUNCTORKIT_CONFIG).",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore any config file and use built-in defaults.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file (rotated).",
    )

    sub = p.add_subparsers(dest="command", metavar="COMMAND")

    # --- map ---
    p_map = sub.add_parser(
        "map",
        help="Apply named functions to every leaf of a tree.",
        description=(
            "Decode TREE (compact JSON: a leaf is a value, a branch is [left, right]) "
            "and map each --fn over it in order."
        ),
    )
    p_map.add_argument("tree", help="Compact JSON tree, e.g. '[10, [20, 30]]'.")
    p_map.add_argument(
        "--fn",
        dest="functions",
        action="append",
        required=True,
        help=f"Function name (repeatable or comma-separated). One of: {', '.join(available_functions())}.",
    )
    _add_json_flag(p_map)

    # --- render ---
    p_render = sub.add_parser("render", help="Draw a tree and print its measurements.")
    p_render.add_argument("tree", help="Compact JSON tree.")
    _add_json_flag(p_render)

    # --- laws ---
    p_laws = sub.add_parser(
        "laws",
        help="Verify the identity and composition laws on generated samples.",
    )
    p_laws.add_argument("--samples", dest="law_samples", type=int, default=None,
                        help="Number of generated samples.")
    p_laws.add_argument("--max-depth", dest="max_depth", type=int, default=None,
                        help="Maximum depth of generated trees.")
    p_laws.add_argument("--seed", dest="seed", type=int, default=None,
                        help="Random seed for reproducible samples.")
    _add_json_flag(p_laws)

    return p


def _add_json_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit machine readable JSON.",
    )

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.debug:
        overrides["log_level"] = "DEBUG"
    if args.log_file:
        overrides["log_file"] = args.log_file

    # Sub-command specific values (absent on other sub-commands)
    overrides["law_samples"] = getattr(args, "law_samples", None)
    overrides["max_depth"] = getattr(args, "max_depth", None)
    overrides["seed"] = getattr(args, "seed", None)

    if getattr(args, "json_output", False):
        overrides["output_format"] = "json"

    return overrides


def function_names(args: argparse.Namespace) -> List[str]:
    """Flatten repeated and comma-separated --fn values, keeping order."""
    names: List[str] = []
    for raw in getattr(args, "functions", None) or []:
        names.extend(_split_csv(raw) or [])
    return names

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
