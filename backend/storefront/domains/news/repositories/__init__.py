"""
Repository layer for the news domain.

Repositories encapsulate database access and SQLAlchemy queries. Higher layers
should depend on the lookup interfaces rather than raw sessions.
"""

from .news_repository import NewsRepository  # noqa: F401
