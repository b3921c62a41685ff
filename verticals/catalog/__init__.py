"""Catalog vertical — book records and their lookups.

- SQLAlchemy Book model with store-assigned ids
- Async repository with exact, substring, threshold and ordered queries
- BookCatalog: validation rules + Outcome classification
- Operation table consumed by the FastAPI router
"""
