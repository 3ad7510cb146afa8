"""Domain layer — schema model and validator.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
