# bloglist/routes/blog.py

"""
Blog Routes.

Summary
-------
Endpoints include:
  - List blogs (owner expanded)
  - Get blog by id
  - Create blog (bearer credential required)
  - Update blog
  - Delete blog (owner only)

Authorization
-------------
Every decision about who may mutate a blog is delegated to
`AuthorizationPolicy`; handlers only translate between HTTP and the
policy/repository calls.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from bloglist.dependencies import BlogRepoDep, CredentialDep, CurrentUserDep, PolicyDep
from bloglist.monitoring import get_logger
from bloglist.schemas import BlogCreate, BlogListResponse, BlogResponse, BlogUpdate

router = APIRouter(prefix="/blogs", tags=["📝 Blogs"])

logger = get_logger(__name__)

UNAUTHORIZED_EXAMPLE = {
    "description": "Missing or invalid bearer token",
    "content": {"application/json": {"example": {"detail": "token invalid"}}},
}
NOT_FOUND_EXAMPLE = {
    "description": "Not found",
    "content": {
        "application/json": {"example": {"detail": "Blog with ID <uuid> not found"}},
    },
}


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogListResponse],
    summary="List blogs",
    description="List every blog with its owner's id, username and name.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": [
                        {
                            "id": "5a422a85-1b54-a676-234d-17f700000000",
                            "title": "React patterns",
                            "author": "Michael Chan",
                            "url": "https://reactpatterns.com/",
                            "likes": 7,
                            "user": {
                                "id": "123e4567-e89b-12d3-a456-426614174000",
                                "username": "mluukkai",
                                "name": "Matti Luukkainen",
                            },
                        },
                    ],
                },
            },
        },
    },
    operation_id="blogs_list",
)
async def get_blogs(repo: BlogRepoDep) -> list[BlogListResponse]:
    """List all blogs with the owner expanded."""
    db_blogs = await repo.get_all_with_owner()
    return [BlogListResponse.model_validate(blog) for blog in db_blogs]


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Get blog by ID",
    responses={404: NOT_FOUND_EXAMPLE},
    operation_id="blogs_get_by_id",
)
async def get_blog(blog_id: UUID, repo: BlogRepoDep) -> BlogResponse:
    """
    Get a blog by its id.

    Raises
    ------
    RecordNotFoundError
        If no blog has this id.
    """
    db_blog = await repo.get_or_raise(blog_id)
    return BlogResponse.model_validate(db_blog)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog",
    description="Create a blog owned by the user named in the bearer token.",
    responses={
        400: {
            "description": "Missing title or url",
            "content": {
                "application/json": {
                    "example": {"detail": "missing required field(s): title"},
                },
            },
        },
        401: UNAUTHORIZED_EXAMPLE,
    },
    operation_id="blogs_create",
)
async def create_blog(
    blog: Annotated[
        BlogCreate,
        Body(
            examples=[
                {
                    "title": "Go To Statement Considered Harmful",
                    "author": "Edsger W. Dijkstra",
                    "url": "https://homepages.cwi.nl/~storm/teaching/reader/Dijkstra68.pdf",
                    "likes": 5,
                },
            ],
        ),
    ],
    current_user: CurrentUserDep,
    policy: PolicyDep,
    repo: BlogRepoDep,
) -> BlogResponse:
    """
    Create a new blog.

    Parameters
    ----------
    blog : BlogCreate
        Blog input payload.
    current_user : UserDB
        Owner resolved from the bearer credential.
    policy : AuthorizationPolicy
        Validation rules for the new blog.
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    BlogResponse
        Created blog; it is also the newest entry of the owner's blog list.

    Raises
    ------
    UnauthenticatedError
        If the bearer credential is missing or invalid.
    InvalidInputError
        If title or url is missing or blank.
    """
    new_blog = policy.validate_create(blog)
    db_blog = await repo.create(new_blog, user_id=current_user.id)
    return BlogResponse.model_validate(db_blog)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Update blog",
    description="Replace the supplied fields of a blog. The owner never changes.",
    responses={
        400: {
            "description": "Blank title or url",
            "content": {
                "application/json": {"example": {"detail": "field(s) cannot be empty: url"}},
            },
        },
        401: UNAUTHORIZED_EXAMPLE,
        403: {
            "description": "Not the owner (only when owner checks are enabled)",
            "content": {
                "application/json": {
                    "example": {"detail": "only the owner can modify this blog"},
                },
            },
        },
        404: NOT_FOUND_EXAMPLE,
    },
    operation_id="blogs_update",
)
async def update_blog(
    blog_id: UUID,
    blog_update: Annotated[
        BlogUpdate,
        Body(examples=[{"likes": 15}]),
    ],
    token: CredentialDep,
    policy: PolicyDep,
    repo: BlogRepoDep,
) -> BlogResponse:
    """
    Update a blog.

    Parameters
    ----------
    blog_id : UUID
        Blog identifier.
    blog_update : BlogUpdate
        Fields to replace.
    token : str | None
        Bearer credential, only consulted when owner checks are enabled.
    policy : AuthorizationPolicy
        Authorization policy.
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    BlogResponse
        Updated blog.
    """
    policy.validate_update(blog_update)
    existing = await repo.get_or_raise(blog_id)
    policy.authorize_update(token, existing)

    db_blog = await repo.update(blog_id, blog_update)
    return BlogResponse.model_validate(db_blog)


@router.delete(
    "/{blog_id}",
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete blog",
    description="Delete a blog. Only its owner may do so.",
    responses={
        204: {"description": "No Content"},
        401: UNAUTHORIZED_EXAMPLE,
        403: {
            "description": "Not the owner",
            "content": {
                "application/json": {
                    "example": {"detail": "only the owner can modify this blog"},
                },
            },
        },
        404: NOT_FOUND_EXAMPLE,
    },
    operation_id="blogs_delete",
)
async def delete_blog(
    blog_id: UUID,
    token: CredentialDep,
    policy: PolicyDep,
    repo: BlogRepoDep,
) -> Response:
    """
    Delete a blog owned by the caller.

    The credential is checked before the lookup, so an anonymous caller
    learns nothing about which ids exist.
    """
    policy.authenticate(token)
    existing = await repo.get_or_raise(blog_id)
    policy.authorize_delete(token, existing)

    await repo.delete(blog_id)
    logger.info(f"Blog {blog_id} deleted")
    return Response(status_code=HTTP_204_NO_CONTENT)
