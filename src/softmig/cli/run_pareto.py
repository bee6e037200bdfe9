"""Pareto optimization CLI runner.

Usage:
    python -m softmig.cli.run_pareto --pop 100 --gen 200
    python -m softmig.cli.run_pareto --instance data.txt --encoding subset --config run.yaml

Prints the non-dominated selections found by NSGA-II as JSON to stdout, with
business values returned to their maximized form. Nothing is written to disk.
"""

from __future__ import annotations

import argparse
import json
import logging
import time

import numpy as np

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Run Pareto optimization.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = success).
    """
    parser = argparse.ArgumentParser(description="Run multi-objective software migration search")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--instance", type=str, default=None, help="Instance file")
    parser.add_argument(
        "--encoding", type=str, default=None, choices=["binary", "subset"], help="Encoding"
    )
    parser.add_argument("--pop", type=int, default=None, help="Population size")
    parser.add_argument("--gen", type=int, default=None, help="Number of generations")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Verbose output")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    # Import here to avoid loading pymoo at module level
    from pymoo.config import Config

    # stdout carries the JSON summary only
    Config.warnings["not_compiled"] = False

    from pymoo.algorithms.moo.nsga2 import NSGA2
    from pymoo.operators.crossover.pntx import TwoPointCrossover
    from pymoo.operators.mutation.bitflip import BitflipMutation
    from pymoo.operators.sampling.rnd import BinaryRandomSampling
    from pymoo.optimize import minimize
    from pymoo.termination import get_termination

    from ..adapters.pymoo_problem import MigrationProblem
    from ..core.config import default_config, load_config, merge_config
    from ..core.evaluator import make_evaluator
    from ..core.parser import load_instance
    from ..paths import SAMPLE_INSTANCE

    config = load_config(args.config) if args.config else default_config()
    config = merge_config(
        config,
        {
            "instance": args.instance,
            "encoding": args.encoding,
            "optimization": {"pop_size": args.pop, "n_gen": args.gen, "seed": args.seed},
        },
    )
    opt = config.optimization

    instance = load_instance(config.instance or SAMPLE_INSTANCE)
    evaluator = make_evaluator(instance, config.encoding)
    problem = MigrationProblem(evaluator)

    algorithm = NSGA2(
        pop_size=opt.pop_size,
        sampling=BinaryRandomSampling(),
        crossover=TwoPointCrossover(prob=opt.crossover_prob),
        mutation=BitflipMutation(prob_var=opt.mutation_prob),
        eliminate_duplicates=True,
    )
    termination = get_termination("n_gen", opt.n_gen)

    logger.info(
        "Starting NSGA-II on %s: pop=%d, gen=%d, %d versions, %d functionalities",
        evaluator.name,
        opt.pop_size,
        opt.n_gen,
        instance.n_versions,
        instance.n_functionalities,
    )

    t_start = time.perf_counter()
    result = minimize(problem, algorithm, termination, seed=opt.seed, verbose=args.verbose)
    t_elapsed = time.perf_counter() - t_start

    solutions = []
    if result.X is not None:
        X = np.atleast_2d(result.X)
        F = np.atleast_2d(result.F)
        for x, f in zip(X, F):
            variable = problem.to_variable(x)
            solutions.append(
                {
                    "selected": evaluator.selected_indices(variable).tolist(),
                    "variable": str(variable),
                    # negate objectives to return them to their maximized form
                    "business_value": (-f).tolist(),
                }
            )

    summary = {
        "evaluator": evaluator.name,
        "n_versions": instance.n_versions,
        "n_functionalities": instance.n_functionalities,
        "n_pareto": len(solutions),
        "n_evals": problem.n_evals,
        "elapsed_s": t_elapsed,
        "pop_size": opt.pop_size,
        "n_gen": opt.n_gen,
        "seed": opt.seed,
        "constraint_names": evaluator.constraint_names,
        "solutions": solutions,
    }

    print(json.dumps(summary, indent=2))

    return 0


if __name__ == "__main__":
    import sys

    sys.exit(main())
