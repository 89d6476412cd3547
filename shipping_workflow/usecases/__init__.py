"""Use-case layer for orchestrating workflow steps.

Each module coordinates domain objects and ports without performing transport
I/O directly, preserving Hexagonal boundaries.
"""
