"""devready — developer workstation readiness checker."""

__version__ = "0.1.0"
