"""
Core decimal value type, arithmetic primitives, and invariants.

This module contains the foundational building blocks that are independent
of external systems (serialization, persistence, CLI wrappers).
"""
