"""
Social Posts
============

Posts, comments and likes of a social network, served over an
authenticated HTTP API and stored in MongoDB.
"""
__version__ = "1.0.0"
