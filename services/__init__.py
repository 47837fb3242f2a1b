"""
services/ - Business Logic Layer
=================================
Services hold the shopping list state and format replies.
They know nothing about Telegram.
"""
