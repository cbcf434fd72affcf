"""Vyral Application Package — progression and decision-state engine.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
