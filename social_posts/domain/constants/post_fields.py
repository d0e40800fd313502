"""Constants for Post document field names"""


class PostFields:
    """Field name constants for Post documents"""
    BODY = "body"
    OWNER = "owner"
    COMMENTS = "comments"
    LIKES = "likes"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class OwnerFields:
    """Field name constants for the owner sub-document embedded in posts and comments"""
    USER_ID = "userId"
    NAME = "name"
    SURNAME = "surname"
    AVATAR = "avatar"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    MONGO_ID = "_id"


class CommentFields:
    """Field name constants for comment sub-documents"""
    BODY = "body"
    OWNER = "owner"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    MONGO_ID = "_id"


class LikeFields:
    """Field name constants for like sub-documents. The _id is the liking user's id."""
    NAME = "name"
    SURNAME = "surname"
    AVATAR = "avatar"

    MONGO_ID = "_id"
