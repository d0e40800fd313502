"""Constants for User document field names"""


class UserFields:
    """Field name constants for User documents"""
    USERNAME = "username"
    EMAIL = "email"
    PASSWORD = "password"
    NAME = "name"
    SURNAME = "surname"
    AVATAR = "avatar"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"
