"""Configuration, logging, error handling and in‑memory storage."""
