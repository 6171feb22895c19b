"""
Service layer abstraction.

Each service wraps one of the in‑memory stores from ``core.store``
and adds the domain rules (id assignment, timestamps) and logging.
API handlers talk to services only, never to the stores directly.
"""
