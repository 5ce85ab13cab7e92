"""Two-stack sorting puzzle: stack operations, input parsing, a sorter and a demo command."""

__version__ = "0.1.0"
__all__ = ["stacks", "parsing", "sorting", "cli"]