import pytest
from bson import ObjectId

from social_posts.application.use_cases.post import (
    GetPostByIdUseCase,
    GetPostCommentUseCase,
    GetPostsUseCase,
)
from social_posts.domain.errors import GettingPostCommentError, GettingPostError
from social_posts.domain.models.post import PostOwner

from tests.fixtures import COMMENT_ID, COMMENTER_ID, CREATED_AT, OTHER_POST_ID, OWNER_ID, POST_ID


def test_get_posts(post_repository, seeded_posts):
    posts = GetPostsUseCase(post_repository).execute()

    assert {post.id for post in posts} == {str(POST_ID), str(OTHER_POST_ID)}


def test_get_posts_error(mocker, post_repository):
    mocker.patch.object(post_repository, "get_posts", side_effect=Exception("Testing error"))

    with pytest.raises(GettingPostError) as exc:
        GetPostsUseCase(post_repository).execute()

    assert str(exc.value) == "Error retrieving posts. Testing error"


def test_get_post_by_id_maps_owner(post_repository, seeded_posts):
    post = GetPostByIdUseCase(post_repository).execute(str(POST_ID))

    assert post.owner == PostOwner(
        id=OWNER_ID, name="Jane", surname="Doe", avatar="https://cdn.example.com/avatars/jane.png"
    )
    assert post.created_at == CREATED_AT


def test_get_post_by_id_missing(post_repository, seeded_posts):
    assert GetPostByIdUseCase(post_repository).execute(str(ObjectId())) is None


def test_get_post_comment(post_repository, seeded_posts):
    comment = GetPostCommentUseCase(post_repository).execute(str(POST_ID), str(COMMENT_ID))

    assert comment.id == str(COMMENT_ID)
    assert comment.owner.id == COMMENTER_ID


def test_get_post_comment_missing(post_repository, seeded_posts):
    assert GetPostCommentUseCase(post_repository).execute(str(POST_ID), str(ObjectId())) is None


def test_get_post_comment_error(mocker, post_repository):
    mocker.patch.object(post_repository, "get_post_comment", side_effect=Exception("Testing error"))

    with pytest.raises(GettingPostCommentError) as exc:
        GetPostCommentUseCase(post_repository).execute(str(POST_ID), str(COMMENT_ID))

    assert str(exc.value) == f"Error retrieving post '{POST_ID}' comment '{COMMENT_ID}'. Testing error"
