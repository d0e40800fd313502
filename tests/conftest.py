"""Fixtures shared by the whole suite: an in-memory MongoDB, the wired app and signed tokens."""
from datetime import timedelta

import mongomock
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from social_posts.application.services.auth_service import AuthService
from social_posts.application.services.post_service import PostService
from social_posts.core.config import get_settings
from social_posts.core.security import create_access_token
from social_posts.di.container import DIContainer, set_container
from social_posts.domain.repositories.post_repository import PostRepository
from social_posts.domain.records import UserRecord
from social_posts.domain.repositories.user_repository import UserRepository
from social_posts.infrastructure.db.mongo_connection import MongoClientManager

from tests.fixtures import POSTS_DOCUMENTS


@pytest.fixture
def mongo_client():
    manager = MongoClientManager(client=mongomock.MongoClient(), database_name="social_posts_test")
    yield manager
    manager.close()


@pytest.fixture
def posts_collection(mongo_client):
    return mongo_client.get_collection(get_settings().posts_collection)


@pytest.fixture
def users_collection(mongo_client):
    return mongo_client.get_collection(get_settings().users_collection)


@pytest.fixture
def seeded_posts(posts_collection):
    """Persist the fixture posts and return their documents."""
    posts_collection.insert_many([dict(doc) for doc in POSTS_DOCUMENTS])
    return POSTS_DOCUMENTS


@pytest.fixture
def container(mongo_client):
    di_container = DIContainer(mongo_client)
    yield di_container
    set_container(None)


@pytest.fixture
def post_repository(container) -> PostRepository:
    return container.get(PostRepository)


@pytest.fixture
def user_repository(container) -> UserRepository:
    return container.get(UserRepository)


@pytest.fixture
def post_service(container) -> PostService:
    return container.get(PostService)


@pytest.fixture
def auth_service(container) -> AuthService:
    return container.get(AuthService)


@pytest.fixture
def user(user_repository):
    return user_repository.create(
        UserRecord(
            username="janedoe",
            email="jane@example.com",
            password="hashed-password",
            name="Jane",
            surname="Doe",
            avatar="https://cdn.example.com/avatars/jane.png",
        )
    )


@pytest.fixture
def token(user):
    return create_access_token(user.id)


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"bearer {token}"}


@pytest.fixture
def expired_token(user):
    return create_access_token(user.id, expires_delta=timedelta(minutes=-5))


@pytest.fixture
def unknown_user_token():
    return create_access_token(str(ObjectId()))


@pytest.fixture
def client(container):
    from social_posts.main import create_application

    return TestClient(create_application(container))
