"""Sort integers with two stacks and a fixed set of operations, and check operation sequences."""

__version__ = "0.1.0"
__all__ = ["checker", "cli", "parsing", "sorting", "stacks"]