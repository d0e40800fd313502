"""
Infrastructure Layer
====================

MongoDB connection, persistence records and repository implementations.
"""
