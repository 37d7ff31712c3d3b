"""Services Layer — request orchestration between the HTTP routes and the stores.

Invariants:
    - Services depend on store Protocols (core/repository_protocols.py), never on a concrete store
    - One handler class per resource

Design Decisions:
    - No multi-step transactions here: each call maps to exactly one store call
"""
