"""Infrastructure layer: JSON record store and rates HTTP client.

This layer depends on stdlib, requests, and the domain models it
persists or parses. It must never import from services, commands, or output.
"""
