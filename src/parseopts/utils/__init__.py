"""Shared utilities — cross-cutting concerns such as logging setup.

Rules
-----
* No option-parsing logic.
* Importable by any layer; imports from no other parseopts layer.
"""
