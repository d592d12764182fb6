"""
Authorization and validation policy for blog mutations.

Routes hand the raw bearer credential (possibly missing) and, for update
and delete, the stored blog to the policy. The policy verifies the
credential with its own `TokenManager` and either returns the decision's
payload or raises:

- `UnauthenticatedError` (401) for a missing or unverifiable credential,
  or one without a subject id
- `ForbiddenError` (403) when the subject is not the blog's owner
- `InvalidInputError` (400) when a body breaks the title/url/likes rules
"""

from uuid import UUID

from bloglist.errors import ForbiddenError, InvalidInputError, UnauthenticatedError
from bloglist.managers.token_manager import TokenManager
from bloglist.models import BlogDB
from bloglist.monitoring import get_logger
from bloglist.schemas.blog import BlogCreate, BlogUpdate, NewBlog

logger = get_logger(__name__)

REQUIRED_BLOG_FIELDS = ("title", "url")


def _is_blank(value: str | None) -> bool:
    return value is None or not value


class AuthorizationPolicy:
    """
    Decide who may create, update and delete blogs.

    Args:
        token_manager: Verifier for bearer credentials (holds the secret)
        require_owner_on_update: When False, updates need no credential at
            all; when True they follow the same owner rule as deletes
    """

    def __init__(
        self,
        token_manager: TokenManager,
        *,
        require_owner_on_update: bool = False,
    ) -> None:
        self.token_manager = token_manager
        self.require_owner_on_update = require_owner_on_update

    def authenticate(self, credential: str | None) -> UUID:
        """Verify `credential` and return its subject id."""
        if not credential:
            raise UnauthenticatedError("token missing")

        token_data = self.token_manager.decode_access_token(credential)
        if token_data is None:
            raise UnauthenticatedError("token invalid")
        if token_data.user_id is None:
            raise UnauthenticatedError("token invalid")
        return token_data.user_id

    def authorize_create(self, credential: str | None) -> UUID:
        """Return the owner id to stamp on a new blog."""
        return self.authenticate(credential)

    def authorize_update(self, credential: str | None, blog: BlogDB) -> None:
        """Allow an update; unconditional unless owner checks are enabled."""
        if not self.require_owner_on_update:
            return
        self._require_owner(credential, blog)

    def authorize_delete(self, credential: str | None, blog: BlogDB) -> None:
        """Allow a delete only for the blog's owner."""
        self._require_owner(credential, blog)

    def _require_owner(self, credential: str | None, blog: BlogDB) -> None:
        subject_id = self.authenticate(credential)
        if blog.user_id != subject_id:
            logger.warning(f"User {subject_id} denied access to blog {blog.id}")
            raise ForbiddenError

    @staticmethod
    def validate_create(payload: BlogCreate) -> NewBlog:
        """
        Apply the creation rules to a request body.

        `title` and `url` must be present and non-empty. Missing, null or
        falsy `likes` all normalize to 0.
        """
        missing = [field for field in REQUIRED_BLOG_FIELDS if _is_blank(getattr(payload, field))]
        if missing:
            raise InvalidInputError(
                detail=f"missing required field(s): {', '.join(missing)}",
                errors=[{"field": field, "message": "Field required"} for field in missing],
            )

        return NewBlog(
            title=payload.title,
            author=payload.author,
            url=payload.url,
            likes=payload.likes or 0,
        )

    @staticmethod
    def validate_update(payload: BlogUpdate) -> BlogUpdate:
        """Reject updates that would blank out `title` or `url`."""
        supplied = payload.model_dump(exclude_unset=True)
        blanked = [
            field
            for field in REQUIRED_BLOG_FIELDS
            if field in supplied and _is_blank(supplied[field])
        ]
        if blanked:
            raise InvalidInputError(
                detail=f"field(s) cannot be empty: {', '.join(blanked)}",
                errors=[{"field": field, "message": "Field cannot be empty"} for field in blanked],
            )
        return payload
