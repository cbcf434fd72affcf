"""Services Layer — ledger store, note store and module catalog lookups.

Invariants:
    - Services call core/ for every state change; they own locking and IO only
    - Ledger actions route through core.ledger's explicit handler dict (no auto-discovery)
"""
