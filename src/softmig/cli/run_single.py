"""Single selection evaluation CLI.

Usage:
    python -m softmig.cli.run_single --select 0,1,4
    python -m softmig.cli.run_single --instance data.txt --bits 110010 --encoding subset

Outputs JSON with F, objectives, G, and diagnostics to stdout.
"""

from __future__ import annotations

import argparse
import json
import logging


def _parse_selection(args: argparse.Namespace, n_functionalities: int) -> list[int]:
    if args.bits is not None:
        if len(args.bits) != n_functionalities or set(args.bits) - {"0", "1"}:
            raise SystemExit(
                f"--bits must be {n_functionalities} characters of 0/1, got {args.bits!r}"
            )
        return [i for i, c in enumerate(args.bits) if c == "1"]
    if args.select:
        return [int(s) for s in args.select.split(",") if s.strip()]
    return []


def main(argv: list[str] | None = None) -> int:
    """Evaluate one selection of functionalities.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = success).
    """
    from ..paths import SAMPLE_INSTANCE

    parser = argparse.ArgumentParser(description="Evaluate a single migration selection")
    parser.add_argument(
        "--instance", type=str, default=str(SAMPLE_INSTANCE), help="Instance file"
    )
    parser.add_argument(
        "--encoding", type=str, default="binary", choices=["binary", "subset"], help="Encoding"
    )
    parser.add_argument("--select", type=str, default="", help="Comma-separated indices")
    parser.add_argument("--bits", type=str, default=None, help="Bit string, index 0 first")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    from ..core.accessors import set_bitset, set_subset
    from ..core.evaluator import make_evaluator
    from ..core.parser import load_instance

    instance = load_instance(args.instance)
    evaluator = make_evaluator(instance, args.encoding)
    selection = _parse_selection(args, instance.n_functionalities)

    solution = evaluator.new_solution()
    variable = solution.variable(0)
    if args.encoding == "subset":
        set_subset(variable, selection)
    else:
        set_bitset(variable, selection)

    result = evaluator.evaluate_solution(solution)

    output = {
        "evaluator": evaluator.name,
        "variable": str(variable),
        "F": result.F.tolist(),
        "objectives": result.objectives.tolist(),
        "G": result.G.tolist(),
        "is_feasible": result.is_feasible,
        "max_violation": result.max_violation,
        "raw_cost": result.diag["raw_cost"],
        "budget": result.diag["budget"],
    }

    print(json.dumps(output, indent=2))

    return 0


if __name__ == "__main__":
    import sys

    sys.exit(main())
