"""Adapters binding the evaluators to external search loops."""
