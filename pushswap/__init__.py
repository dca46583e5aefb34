"""Sort integers on two stacks with push, swap and rotate operations."""

__version__ = "1.0.0"
__all__ = ["arguments", "cli", "sorting", "stacks"]