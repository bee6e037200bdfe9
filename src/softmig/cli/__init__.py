"""CLI modules for evaluating selections and running the search loop.

Note: avoid importing submodules at import-time. This keeps `python -m softmig.cli.<cmd>`
free of `runpy` warnings and avoids loading pymoo eagerly.
"""

from __future__ import annotations


def run_pareto_main(argv: list[str] | None = None) -> int:
    """Lazy wrapper for `softmig.cli.run_pareto.main`."""

    from .run_pareto import main

    return main(argv)


def run_single_main(argv: list[str] | None = None) -> int:
    """Lazy wrapper for `softmig.cli.run_single.main`."""

    from .run_single import main

    return main(argv)


__all__ = ["run_pareto_main", "run_single_main"]
