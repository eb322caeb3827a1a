"""Service layer — quote logic returning ServiceResult.

Services may import from the domain and output layers.
They must never import from commands or config.
"""
