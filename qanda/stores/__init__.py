"""Stores — QuestionsStore / AnswersStore implementations (core/repository_protocols.py).

Invariants:
    - Stores are stateless apart from the injected engine or storage
    - Only StoreError subclasses escape a store

Design Decisions:
    - SQL stores for production, in-memory stores for tests and storage_backend="memory"
"""
