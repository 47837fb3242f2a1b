"""
models/ - Domain Layer
=======================
Plain types describing shopping lists and operation results.
"""
