"""
MongoDB Persistence
===================
"""
