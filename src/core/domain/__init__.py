"""Domain models and entities.

Why:
- Plain, strict data structures (Pydantic v2) live here.
- The domain knows nothing about HTTP, the CLI or API SDKs: only problem concepts.
"""
