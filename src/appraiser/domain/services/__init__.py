"""
Domain Services

Business logic operating on domain models.
"""
