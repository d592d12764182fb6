"""Login route issuing bearer tokens."""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse

from bloglist.dependencies import TokenManagerDep, UserRepoDep
from bloglist.errors import InvalidCredentialsError
from bloglist.monitoring import get_logger
from bloglist.schemas import LoginRequest, LoginResponse

router = APIRouter(prefix="/login", tags=["🔐 Auth"])

logger = get_logger(__name__)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=LoginResponse,
    summary="Login for access token",
    description="Exchange a username and password for a bearer token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                    },
                },
            },
        },
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {"example": {"detail": "invalid username or password"}},
            },
        },
    },
    operation_id="auth_login",
)
async def login(
    credentials: LoginRequest,
    repo: UserRepoDep,
    token_manager: TokenManagerDep,
) -> LoginResponse:
    """
    Login with username and password.

    Parameters
    ----------
    credentials : LoginRequest
        Username and password.
    repo : UserRepository
        User repository dependency.
    token_manager : TokenManager
        Signs the issued token.

    Returns
    -------
    LoginResponse
        Bearer token plus the user's username and name.

    Raises
    ------
    InvalidCredentialsError
        If the username is unknown or the password does not match.
    """
    user = await repo.do_password_verify(
        credentials.username,
        credentials.password.get_secret_value(),
    )
    if user is None:
        logger.warning(f"Failed login for {credentials.username}")
        raise InvalidCredentialsError

    token = token_manager.create_access_token(user_id=user.id, username=user.username)
    return LoginResponse(token=token, username=user.username, name=user.name)
