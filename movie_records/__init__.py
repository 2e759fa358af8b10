"""
Top-level package for the movie records dashboard.

This package exposes the core architecture (domain, services, UI adapters).
Most code should import from submodules such as:
    movie_records.core
    movie_records.services
    movie_records.ui
"""

__all__: list[str] = []
