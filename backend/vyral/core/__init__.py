"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Every transition is deterministic for a fixed TransitionContext (clock + tokens)

Design Decisions:
    - Functional core separated from imperative shell: the shell owns the clock,
      the lock and the database, core only computes the next state
"""
