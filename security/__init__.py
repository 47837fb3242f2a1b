"""
security/ - Handler Middleware
===============================
Decorators wrapped around Telegram handlers.
"""
