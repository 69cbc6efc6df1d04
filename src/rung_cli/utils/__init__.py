"""Shared utilities — logging setup and cross-cutting concerns.

Rules
-----
* No business logic.
* Importable by any layer.
"""
