import pytest
from bson import ObjectId

from social_posts.application.use_cases.post import DislikePostUseCase, LikePostUseCase
from social_posts.domain.errors import DislikingPostError, LikingPostError
from social_posts.domain.models.post import PostLike

from tests.fixtures import LIKER_ID, OWNER_ID, POST_ID, UPDATED_AT

NULL_RESULT = "initiated but completed with NULL result"
JANE = PostLike(id=OWNER_ID, name="Jane", surname="Doe", avatar="jane.png")
ANN = PostLike(
    id=LIKER_ID, name="Ann", surname="Lee", avatar="https://cdn.example.com/avatars/ann.png"
)


class TestLikePost:
    def test_adds_the_like(self, post_repository, seeded_posts):
        post = LikePostUseCase(post_repository).execute(str(POST_ID), JANE)

        assert [like.id for like in post.likes] == [LIKER_ID, OWNER_ID]
        assert post.likes[-1] == JANE

    def test_liking_twice_keeps_one_like(self, post_repository, seeded_posts):
        use_case = LikePostUseCase(post_repository)
        use_case.execute(str(POST_ID), JANE)
        post = use_case.execute(str(POST_ID), JANE)

        assert [like.id for like in post.likes] == [LIKER_ID, OWNER_ID]
        assert post.likes[0] == ANN

    def test_liking_again_refreshes_the_snapshot_in_place(self, post_repository, seeded_posts):
        use_case = LikePostUseCase(post_repository)
        use_case.execute(str(POST_ID), JANE)
        renamed = PostLike(id=OWNER_ID, name="Jane", surname="Doe-Smith", avatar="jane2.png")

        post = use_case.execute(str(POST_ID), renamed)

        assert post.likes == [ANN, renamed]

    def test_each_like_moves_updated_at(self, post_repository, seeded_posts):
        use_case = LikePostUseCase(post_repository)

        first = use_case.execute(str(POST_ID), JANE)
        second = use_case.execute(str(POST_ID), JANE)

        assert first.updated_at != UPDATED_AT
        assert second.updated_at != first.updated_at

    def test_missing_post_raises(self, post_repository, seeded_posts):
        missing_id = str(ObjectId())

        with pytest.raises(LikingPostError) as exc:
            LikePostUseCase(post_repository).execute(missing_id, JANE)

        assert str(exc.value) == (
            f"Error liking post '{missing_id}' by user '{OWNER_ID}'. Post like process {NULL_RESULT}"
        )

    def test_data_source_error_is_wrapped(self, mocker, post_repository):
        mocker.patch.object(post_repository, "like_post", side_effect=Exception("Testing error"))

        with pytest.raises(LikingPostError) as exc:
            LikePostUseCase(post_repository).execute(str(POST_ID), JANE)

        assert str(exc.value) == f"Error liking post '{POST_ID}' by user '{OWNER_ID}'. Testing error"


class TestDislikePost:
    def test_removes_the_like(self, post_repository, seeded_posts):
        post = DislikePostUseCase(post_repository).execute(str(POST_ID), LIKER_ID)

        assert post.likes == []

    def test_without_like_returns_post_unchanged(self, post_repository, seeded_posts):
        post = DislikePostUseCase(post_repository).execute(str(POST_ID), OWNER_ID)

        assert [like.id for like in post.likes] == [LIKER_ID]
        assert post.updated_at == UPDATED_AT

    def test_missing_post_raises(self, post_repository, seeded_posts):
        missing_id = str(ObjectId())

        with pytest.raises(DislikingPostError) as exc:
            DislikePostUseCase(post_repository).execute(missing_id, LIKER_ID)

        assert str(exc.value) == (
            f"Error disliking post '{missing_id}' by user '{LIKER_ID}'. Post dislike process {NULL_RESULT}"
        )

    def test_data_source_error_is_wrapped(self, mocker, post_repository):
        mocker.patch.object(post_repository, "dislike_post", side_effect=Exception("Testing error"))

        with pytest.raises(DislikingPostError):
            DislikePostUseCase(post_repository).execute(str(POST_ID), LIKER_ID)

    def test_like_then_dislike_moves_updated_at(self, post_repository, seeded_posts):
        liked = LikePostUseCase(post_repository).execute(str(POST_ID), JANE)
        disliked = DislikePostUseCase(post_repository).execute(str(POST_ID), OWNER_ID)

        assert [like.id for like in disliked.likes] == [LIKER_ID]
        assert disliked.updated_at != liked.updated_at
