"""Sort integers with two stacks and a restricted set of operations, and check such sequences."""

__version__ = "1.0.0"