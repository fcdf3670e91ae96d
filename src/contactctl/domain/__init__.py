"""Domain layer — field types, assembly, and the email lifecycle.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
