"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates the storage format for a specific domain entity.
Repositories read raw data from disk and return domain objects.
"""
