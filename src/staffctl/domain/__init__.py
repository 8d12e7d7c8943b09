"""Domain layer: employee model, validation rules, and money formatting.

This layer depends only on stdlib, pydantic, and Babel.
It must never import from services, infrastructure, commands, or config.
"""
