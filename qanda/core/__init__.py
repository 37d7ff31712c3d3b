"""Core Layer — pure domain types, identifier codec, error taxonomy, store contracts.

Invariants:
    - No module in core/ imports from services/, stores/, api/, infrastructure/, or db/
    - No IO, no async bodies (Protocols only declare async signatures)
"""
