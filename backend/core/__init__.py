"""Core backend infrastructure for the football manager backend.

This package contains configuration, logging, database, the persistence
context, the retry policy and the FastAPI dependency helpers.
"""
