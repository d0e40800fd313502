"""
Post Controller
===============

FastAPI controller for post endpoints. Every endpoint requires a bearer token.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from social_posts.application.dto.post_dto import (
    PostCommentRequest,
    PostCommentResponse,
    PostCreateRequest,
    PostLikeRequest,
    PostLikeResponse,
    PostResponse,
)
from social_posts.api.v1.dependencies import get_current_user, get_post_service
from social_posts.application.services.post_service import PostService
from social_posts.domain.models.user import User

router = APIRouter(tags=["posts"])


@router.post(
    "/create",
    response_model=PostResponse,
    status_code=status.HTTP_200_OK,
    summary="Create a post",
    description="Publish a new post owned by the caller. Comments and likes start empty."
)
async def create_post(
    request: PostCreateRequest,
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Create a post."""
    post = service.create_post(current_user.to_post_owner(), request.post_body)
    return PostResponse.from_domain(post)


@router.get(
    "",
    response_model=List[PostResponse],
    summary="List posts",
    description="Get every post, unfiltered and unpaginated."
)
async def list_posts(
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
) -> List[PostResponse]:
    """List all posts."""
    return [PostResponse.from_domain(post) for post in service.get_posts()]


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    summary="Get post by ID",
)
async def get_post(
    post_id: str,
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Get a specific post by ID."""
    post = service.get_post_by_id(post_id)

    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )

    return PostResponse.from_domain(post)


@router.post(
    "/comment",
    response_model=PostResponse,
    summary="Comment a post",
    description="Append a comment owned by the caller and return the updated post."
)
async def create_post_comment(
    request: PostCommentRequest,
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    post = service.create_post_comment(request.post_id, request.comment_body, current_user.to_post_owner())
    return PostResponse.from_domain(post)


@router.get(
    "/{post_id}/comments/{comment_id}",
    response_model=Optional[PostCommentResponse],
    summary="Get a post comment",
    description="Returns null when the post or the comment does not exist."
)
async def get_post_comment(
    post_id: str,
    comment_id: str,
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
) -> Optional[PostCommentResponse]:
    comment = service.get_post_comment(post_id, comment_id)
    return PostCommentResponse.from_domain(comment) if comment else None


@router.post(
    "/like",
    response_model=PostResponse,
    summary="Like a post",
    description="Like a post as the caller. Liking again refreshes the existing like."
)
async def like_post(
    request: PostLikeRequest,
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    post = service.like_post(request.post_id, current_user.to_post_like())
    return PostResponse.from_domain(post)


@router.post(
    "/dislike",
    response_model=PostResponse,
    summary="Remove a like",
    description="Remove the caller's like from a post."
)
async def dislike_post(
    request: PostLikeRequest,
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    post = service.dislike_post(request.post_id, current_user.id)
    return PostResponse.from_domain(post)


@router.get(
    "/{post_id}/likes/{owner_id}",
    response_model=Optional[PostLikeResponse],
    summary="Get a post like by owner",
    description="Returns null when the post does not exist or the user has not liked it."
)
async def get_post_like_by_owner_id(
    post_id: str,
    owner_id: str,
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
) -> Optional[PostLikeResponse]:
    like = service.get_post_like_by_owner_id(post_id, owner_id)
    return PostLikeResponse.from_domain(like) if like else None
