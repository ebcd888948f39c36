"""Domain layer — result type, smart constructors, and role variants.

This layer depends only on stdlib and pydantic.
It must never import from services, plugins, commands, or config.
"""
