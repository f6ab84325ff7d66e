"""Shared utilities: configuration, logging, and cross-cutting concerns.

Rules
-----
* No business logic.
* No network I/O.
* Importable by any layer.
"""
