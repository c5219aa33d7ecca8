from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, configuration loading
and merging (defaults, config file, CLI overrides), logging bootstrap,
sub-command execution and result rendering.
"""

import functools
import json
import operator
import random
import sys
from typing import Any, Dict, List, Optional, Tuple

from functorkit.core import catalog
from functorkit.core.functor.base import Functor
from functorkit.core.functor.instances import (
    FunctionFunctor,
    ListFunctor,
    MappingFunctor,
    OptionFunctor,
    TreeFunctor,
    TupleFunctor,
)
from functorkit.core.functor.laws import LawReport, probe_eq, verify_laws
from functorkit.core.functor.registry import fmap
from functorkit.core.tree import codec, traversal
from functorkit.core.tree.generator import random_tree
from functorkit.core.tree.render import render_tree
from functorkit.core.validator import validate_config
from functorkit.domain.config import get_default_config, load_config
from functorkit.domain.errors import FunctorError
from functorkit.domain.option_models import NOTHING, Some
from functorkit.domain.tree_models import Tree
from functorkit.infra.logging import LoggingConfig, configure_logging, get_logger
from functorkit.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2
EXIT_INTERRUPTED = 130

# Arguments used to compare callables in the function-functor law check
_FUNCTION_PROBES = list(range(-5, 6))

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 invalid input).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve configuration hierarchy (defaults -> file -> CLI)
    base_conf = get_default_config() if args.use_defaults else load_config(args.config_path)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console on stderr, optional rotating file)
    configure_logging(LoggingConfig(
        level=clean_conf["log_level"],
        console=True,
        log_file=clean_conf["log_file"],
    ))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if not args.command:
        parser.print_help(sys.stderr)
        return EXIT_INVALID_INPUT

    # 4. Sub-command execution
    handlers = {
        "map": _run_map,
        "render": _run_render,
        "laws": _run_laws,
    }
    logger.debug(f"Dispatching command '{args.command}'.")
    try:
        return handlers[args.command](args, clean_conf)
    except FunctorError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.critical(f"Command '{args.command}' failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

# -----------------------------------------------------------------------------
# SUB-COMMANDS
# -----------------------------------------------------------------------------

def _run_map(args: Any, conf: Dict[str, Any]) -> int:
    """Decode the tree, map each named function over it in order, print it."""
    tree = codec.loads(args.tree)
    names = cli_args.function_names(args)
    if not names:
        print("ERROR: at least one --fn is required.", file=sys.stderr)
        return EXIT_INVALID_INPUT

    # chain resolves every name first; a typo fails before the tree is mapped
    fn = catalog.chain(names)
    tree = fmap(tree, fn, instance=TreeFunctor())

    logger.info(f"Mapped {len(names)} function(s) over {traversal.leaf_count(tree)} leaves.")

    if conf["output_format"] == "json":
        print(_json_with_tree(tree, {
            "functions": names,
            "depth": traversal.depth(tree),
            "size": traversal.size(tree),
        }))
    else:
        print("\n".join(render_tree(tree)))
    return EXIT_OK


def _run_render(args: Any, conf: Dict[str, Any]) -> int:
    """Draw the tree and report its measurements."""
    tree = codec.loads(args.tree)
    stats = _tree_stats(tree)

    if conf["output_format"] == "json":
        print(_json_with_tree(tree, stats))
    else:
        print("\n".join(render_tree(tree)))
        print(f"depth: {stats['depth']}, size: {stats['size']}, leaves: {stats['leaf_count']}")
    return EXIT_OK


def _run_laws(args: Any, conf: Dict[str, Any]) -> int:
    """Check identity and composition for every builtin instance."""
    seed = conf["seed"]
    if seed is None:
        seed = random.randrange(2 ** 32)
    rng = random.Random(seed)

    trees = [random_tree(conf["max_depth"], rng) for _ in range(conf["law_samples"])]
    functions = [(name, catalog.FUNCTIONS[name]) for name in catalog.NUMERIC_FUNCTIONS]

    logger.info(f"Checking functor laws on {len(trees)} samples (seed={seed}).")
    reports = [
        verify_laws(instance, samples, functions, eq=eq)
        for instance, samples, eq in _law_suites(trees)
    ]
    ok = all(r.ok for r in reports)

    if conf["output_format"] == "json":
        print(json.dumps({
            "seed": seed,
            "ok": ok,
            "reports": [r.as_dict() for r in reports],
        }, ensure_ascii=False))
    else:
        _print_law_summary(reports, seed)

    return EXIT_OK if ok else EXIT_FAILURE

# -----------------------------------------------------------------------------
# LAW SUITES
# -----------------------------------------------------------------------------

def _law_suites(trees: List[Tree[Any]]) -> List[Tuple[Functor, List[Any], Any]]:
    """
    Derive samples for every builtin instance from the generated trees.

    Returns:
        List of (instance, samples, equality) triples.
    """
    values = [traversal.leaves(t) for t in trees]
    # Alternate present and absent options; every tree has at least one leaf
    options = [Some(v[0]) if i % 2 == 0 else NOTHING for i, v in enumerate(values)]
    adders = [functools.partial(operator.add, v[0]) for v in values]
    return [
        (TreeFunctor(), trees, traversal.equal),
        (ListFunctor(), values, operator.eq),
        (TupleFunctor(), [tuple(v) for v in values], operator.eq),
        (OptionFunctor(), options, operator.eq),
        (MappingFunctor(), [dict(enumerate(v)) for v in values], operator.eq),
        (FunctionFunctor(), adders, probe_eq(_FUNCTION_PROBES)),
    ]

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of non-None override values into the base configuration.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _tree_stats(tree: Tree[Any]) -> Dict[str, int]:
    return {
        "depth": traversal.depth(tree),
        "size": traversal.size(tree),
        "leaf_count": traversal.leaf_count(tree),
    }


def _json_with_tree(tree: Tree[Any], fields: Dict[str, Any]) -> str:
    """
    Serialize `fields` as a JSON object with the encoded tree under "tree".

    The tree goes through the codec because its nesting may exceed what
    `json.dumps` accepts.
    """
    body = json.dumps(fields, ensure_ascii=False)
    head = f'{{"tree": {codec.dumps(tree)}'
    return head + ("}" if body == "{}" else ", " + body[1:])


def _print_law_summary(reports: List[LawReport], seed: int) -> None:
    """
    Print one status line per instance, followed by any failure details.

    Args:
        reports: Law reports to render.
        seed: Seed used to generate the samples.
    """
    print(f"Seed: {seed}")
    for report in reports:
        status = "OK" if report.ok else f"FAILED ({len(report.failures)})"
        print(f"  {report.instance:<10} {report.checked:>6} checks  {status}")
        for failure in report.failures:
            print(f"    - {failure.law}: {failure.detail}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
