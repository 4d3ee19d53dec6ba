"""Sort integers with two stacks and a minimal operation set, printing each operation."""

__version__ = "1.0.0"