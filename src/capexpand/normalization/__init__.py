"""
Data normalization layer for standardizing input tables.

Handles timestamp parsing, column naming and per-column type coercion
so that every loaded table has one canonical representation.
"""
