"""
Service layer abstraction.

Each service encapsulates the rules for a domain and talks to a
repository passed in at construction time, so API handlers never touch
storage directly.
"""
