"""A mergeable max-priority queue on a leftist heap, with rollback when a comparison fails, plus self-checks."""

__version__ = "0.1.0"
__all__ = ["errors", "priority_queue", "selfcheck_core", "selfcheck_extra", "cli"]