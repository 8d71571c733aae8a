"""Persistence adapters: SQL (SQLAlchemy async) and in-memory."""
