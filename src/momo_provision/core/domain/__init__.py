"""Domain models and entities.

Pure data structures (Pydantic v2) and value checks. The domain knows
nothing about HTTP, the CLI or the `.env` file.
"""
