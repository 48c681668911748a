"""
Storefront news presentation package.

Turns persisted news items and comments into view models for the storefront
pages (home page widget, news archive, news item details).
"""

__version__ = "0.1.0"
