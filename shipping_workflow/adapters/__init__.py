"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (the package service
    REST client and its in-memory double) used by use cases.

Dependencies:
    The REST submodules depend on ``requests``; the mock has no I/O.

Call context:
    Imported by app composition modules (for runtime wiring) and by tests (for
    mocks and transport-level behavior verification).
"""
