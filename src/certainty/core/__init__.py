"""
Core value types, numerical primitives, and serialization contracts.

This package has no I/O and no shared mutable state apart from the
read-only JSON Schema cache in certainty.core.contracts.
"""
