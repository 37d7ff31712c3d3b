"""Q&A Service Package — questions and answers over a relational store.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
