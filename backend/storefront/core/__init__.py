"""
Core configuration, request context, caching and exceptions
"""
