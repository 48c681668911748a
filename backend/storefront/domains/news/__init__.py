"""
News domain package.

Provides the presentation model factory for news items together with the
repository and facade wiring it to a database session.
"""

from .facade import NewsFacade  # noqa: F401
from .factory import NewsModelFactory  # noqa: F401
from .repositories import NewsRepository  # noqa: F401
