"""Infrastructure Layer — graph supply and cross-cutting concerns.

Invariants:
    - Infrastructure never reaches into the engine internals
    - Everything handed to core/ is an immutable snapshot
"""
