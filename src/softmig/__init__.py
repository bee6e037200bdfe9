"""softmig: decision-variable codec and software migration evaluator."""

__version__ = "0.1.0"
