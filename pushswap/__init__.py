"""Sort integers with two stacks and a limited set of instructions."""

__version__ = "1.0.0"