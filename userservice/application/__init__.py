"""Application layer: commands, queries, handlers and shared services.

Imports from the domain layer only; adapters arrive through constructors.
"""
