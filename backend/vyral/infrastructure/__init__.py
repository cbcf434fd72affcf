"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports transition logic from core/ (types and errors only)
    - All external calls wrapped with retry/timeout/error mapping
"""
