"""Software migration instance file parser and writer.

Format (comment lines starting with '#' and blank lines are dropped):

    Software migration problem specification (<N> versions, <M> functionalities)
    N times:
        =                       separator, content ignored
        Version <label>:        label, content ignored
         budget: +<int>
        M times:
            functionality j:    label, content ignored
              cost: +<int>
              bvalue: +<int>

Parsing is strictly line-positional. The first line that fails its pattern
raises FormatError tagged with the line class; no partial instance is built.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

import numpy as np

from .errors import FormatError
from .instance import ProblemInstance

logger = logging.getLogger(__name__)

SPECIFICATION_PATTERN = re.compile(
    r"Software\s+migration\s+problem\s+specification\s*"
    r"\(\s*(\d+)\s+versions\s*,\s*(\d+)\s+functionalities\s*\)"
)
BUDGET_PATTERN = re.compile(r"budget:\s*\+(\d+)")
COST_PATTERN = re.compile(r"cost:\s*\+(\d+)")
BVALUE_PATTERN = re.compile(r"bvalue:\s*\+(\d+)")
INT64_MAX = int(np.iinfo(np.int64).max)


class _LineCursor:
    """Walks meaningful lines, remembering physical line numbers."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[tuple[int, str]] = (
            (number, line.strip())
            for number, line in enumerate(lines, start=1)
            if line.strip() and not line.lstrip().startswith("#")
        )
        self.line_number: int | None = None

    def next(self, line_class: str) -> tuple[int, str]:
        try:
            number, line = next(self._lines)
        except StopIteration:
            raise FormatError(line_class, None, "unexpected end of input") from None
        self.line_number = number
        return number, line

    def match(self, pattern: re.Pattern[str], line_class: str) -> re.Match[str]:
        number, line = self.next(line_class)
        m = pattern.fullmatch(line)
        if m is None:
            raise FormatError(line_class, number, repr(line))
        return m

    def match_int(self, pattern: re.Pattern[str], line_class: str) -> int:
        """Match and return group 1 as an integer that fits in int64."""
        value = int(self.match(pattern, line_class).group(1))
        if value > INT64_MAX:
            raise FormatError(line_class, self.line_number, f"{value} exceeds {INT64_MAX}")
        return value


def parse_instance(source: str | Iterable[str]) -> ProblemInstance:
    """Parse instance text (a string or an iterable of lines).

    Raises:
        FormatError: A required line is missing or does not match.
    """
    lines = source.splitlines() if isinstance(source, str) else source
    cursor = _LineCursor(lines)

    m = cursor.match(SPECIFICATION_PATTERN, "specification")
    n_versions, n_functionalities = int(m.group(1)), int(m.group(2))
    if n_versions < 1 or n_functionalities < 1:
        raise FormatError(
            "specification",
            cursor.line_number,
            f"need at least one version and one functionality, "
            f"got {n_versions} versions, {n_functionalities} functionalities",
        )

    budget = np.zeros(n_versions, dtype=np.int64)
    value = np.zeros((n_versions, n_functionalities), dtype=np.int64)
    cost = np.zeros((n_versions, n_functionalities), dtype=np.int64)

    for i in range(n_versions):
        cursor.next("separator")
        cursor.next("label")
        budget[i] = cursor.match_int(BUDGET_PATTERN, "budget")

        for j in range(n_functionalities):
            cursor.next("label")
            cost[i, j] = cursor.match_int(COST_PATTERN, "cost")
            value[i, j] = cursor.match_int(BVALUE_PATTERN, "bvalue")

    instance = ProblemInstance(n_versions, n_functionalities, value, cost, budget)
    logger.debug(
        "Parsed migration instance: %d versions, %d functionalities",
        n_versions,
        n_functionalities,
    )
    return instance


def load_instance(path: str | Path) -> ProblemInstance:
    """Load an instance file. The file is closed before returning."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Instance file not found: {path}")

    with open(path) as f:
        instance = parse_instance(f)

    logger.debug("Loaded instance from %s", path)
    return instance


def format_instance(
    instance: ProblemInstance,
    version_labels: Sequence[str] | None = None,
) -> str:
    """Render an instance in the file format read by parse_instance."""
    if version_labels is None:
        version_labels = [str(i + 1) for i in range(instance.n_versions)]
    if len(version_labels) != instance.n_versions:
        raise ValueError(
            f"Expected {instance.n_versions} version labels, got {len(version_labels)}"
        )

    out = [
        f"Software migration problem specification "
        f"({instance.n_versions} versions, {instance.n_functionalities} functionalities)"
    ]
    for i, label in enumerate(version_labels):
        out.append("=")
        out.append(f"Version {label}:")
        out.append(f" budget: +{int(instance.budget[i])}")
        for j in range(instance.n_functionalities):
            out.append(f" functionality {j + 1}:")
            out.append(f"  cost: +{int(instance.cost[i, j])}")
            out.append(f"  bvalue: +{int(instance.value[i, j])}")
    return "\n".join(out) + "\n"


def save_instance(instance: ProblemInstance, path: str | Path, **kwargs) -> None:
    """Write an instance file (see format_instance)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        f.write(format_instance(instance, **kwargs))
