"""Error taxonomy for the codec, accessors, parser and evaluators.

Every error is unrecoverable at the point of detection and aborts the
enclosing operation. Nothing in softmig retries or substitutes defaults.
"""

from __future__ import annotations


class SoftmigError(Exception):
    """Base for all softmig exceptions."""


class RangeError(SoftmigError, ValueError):
    """Numeric input outside its documented domain."""


class TypeMismatch(SoftmigError, TypeError):
    """Accessor invoked on the wrong decision-variable kind."""


class LengthMismatch(SoftmigError, ValueError):
    """Bit vector or subset length/cardinality disagreement on write."""


class DimensionMismatch(SoftmigError, ValueError):
    """Problem instance and decision variable (or arrays) disagree on shape."""


class FormatError(SoftmigError, ValueError):
    """Instance file line failed to match its expected grammar.

    Attributes:
        line_class: Which kind of line failed ("specification", "budget",
            "cost", "bvalue", "separator" or "label").
        line_number: 1-based physical line number in the input, or None at
            end of input.
    """

    def __init__(self, line_class: str, line_number: int | None, detail: str = "") -> None:
        self.line_class = line_class
        self.line_number = line_number
        where = f"line {line_number}" if line_number is not None else "end of input"
        message = (
            f"Software migration data file not properly formatted: "
            f"invalid {line_class} line ({where})"
        )
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
