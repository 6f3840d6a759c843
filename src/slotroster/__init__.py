"""Weekly two-hour slot rostering engine."""

__version__ = "0.1.0"
