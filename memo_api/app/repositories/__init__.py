"""
Repositories owning the application's records.

Only an in‑memory implementation exists; all state is lost when the
process exits.
"""
