"""
Persisted post documents used across the suite.

Datetimes are naive UTC with millisecond precision, the way MongoDB hands
them back.
"""
from datetime import datetime

from bson import ObjectId

POST_ID = ObjectId("5edbc3e4ea9ff3e1ab4b2e6c")
OTHER_POST_ID = ObjectId("5edbc3e4ea9ff3e1ab4b2e6d")
COMMENT_ID = ObjectId("5edbc3e4ea9ff3e1ab4b2e70")

OWNER_ID = "5edbc3e4ea9ff3e1ab4b2e6a"
COMMENTER_ID = "5edbc3e4ea9ff3e1ab4b2e6b"
LIKER_ID = "5edbc3e4ea9ff3e1ab4b2e6e"

CREATED_AT = datetime(2020, 6, 6, 16, 30, 0, 123000)
UPDATED_AT = datetime(2020, 6, 7, 9, 15, 42, 500000)

CREATED_AT_ISO = "2020-06-06T16:30:00.123Z"
UPDATED_AT_ISO = "2020-06-07T09:15:42.500Z"

POST_OWNER = {
    "_id": ObjectId("5edbc3e4ea9ff3e1ab4b2e71"),
    "userId": OWNER_ID,
    "name": "Jane",
    "surname": "Doe",
    "avatar": "https://cdn.example.com/avatars/jane.png",
    "createdAt": CREATED_AT,
    "updatedAt": CREATED_AT,
}

COMMENT = {
    "_id": COMMENT_ID,
    "body": "Nice post!",
    "owner": {
        "_id": ObjectId("5edbc3e4ea9ff3e1ab4b2e72"),
        "userId": COMMENTER_ID,
        "name": "John",
        "surname": "Smith",
        "avatar": "https://cdn.example.com/avatars/john.png",
    },
    "createdAt": UPDATED_AT,
    "updatedAt": UPDATED_AT,
}

LIKE = {
    "_id": LIKER_ID,
    "name": "Ann",
    "surname": "Lee",
    "avatar": "https://cdn.example.com/avatars/ann.png",
}

POST = {
    "_id": POST_ID,
    "body": "Hello world!",
    "owner": POST_OWNER,
    "comments": [COMMENT],
    "likes": [LIKE],
    "createdAt": CREATED_AT,
    "updatedAt": UPDATED_AT,
}

OTHER_POST = {
    "_id": OTHER_POST_ID,
    "body": "Second post",
    "owner": POST_OWNER,
    "comments": [],
    "likes": [],
    "createdAt": CREATED_AT,
    "updatedAt": CREATED_AT,
}

POSTS_DOCUMENTS = [POST, OTHER_POST]
