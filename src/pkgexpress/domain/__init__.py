"""Domain layer — quote record, lifecycle, and measurement rules.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
