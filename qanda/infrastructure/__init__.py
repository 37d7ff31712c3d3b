"""Infrastructure Layer — database engine/pool wiring and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
"""
