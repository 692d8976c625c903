"""Helpers for sequences, numbers, strings, timing, retries, transactions, debouncing and throttling."""

__version__ = "0.1.0"

__all__ = ["mutable", "numeric", "parallel", "retry", "sequence", "subsets", "text", "timing"]