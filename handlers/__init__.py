"""
handlers/ - Presentation Layer
================================
Telegram bot handlers. Each handler receives updates from Telegram,
delegates to the ShoppingListService, and sends the response back to the chat.
No business logic lives here.
"""
