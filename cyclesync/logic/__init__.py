"""Core business logic layer.

Subpackages:
- plan: resolving planned sessions from the weekly plan
- logs: normalizing and editing journal entries
- reporting: insights aggregation and the calendar month view

Everything here is pure: collections and "today" are passed in by the caller.
"""
__all__ = ["plan", "logs", "reporting"]
