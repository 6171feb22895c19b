"""
Pydantic schema definitions for API payloads.

Request and response bodies are declared here, separate from the
store records, so the wire format can evolve independently.
"""
