"""Core — error taxonomy and the repository contracts the API depends on.

Invariants:
    - Core never imports from api/ or infrastructure/
"""
