"""API REST FastAPI (dispatcher des endpoints)."""
