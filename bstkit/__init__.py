"""Binary search tree construction, iteration, queries, repair and checks."""

__version__ = "0.1.0"
__all__ = ["node", "iterator", "queries", "transforms"]