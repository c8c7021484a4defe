from typing import Annotated, cast

from fastapi import Depends, Request
from fastapi.security import APIKeyCookie, HTTPAuthorizationCredentials, HTTPBearer

from bloglist.app import App
from bloglist.core.modules.session.models import AuthToken
from bloglist.errors import AuthenticationError

# Security schemes
bearer_scheme = HTTPBearer(auto_error=False)
cookie_scheme = APIKeyCookie(name="auth_token", auto_error=False)


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


def _presented_token(
    credentials: HTTPAuthorizationCredentials | None, token_cookie: str | None
) -> AuthToken | None:
    """Bearer header wins over the cookie."""
    if credentials and credentials.scheme.lower() == "bearer":
        return AuthToken(credentials.credentials)
    if token_cookie:
        return AuthToken(token_cookie)
    return None


async def get_auth_token(
    app: Annotated[App, Depends(get_app)],
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)] = None,
    token_cookie: Annotated[str | None, Depends(cookie_scheme)] = None,
) -> AuthToken:
    """Get and validate auth token from Authorization Bearer header or cookie."""
    auth_token = _presented_token(credentials, token_cookie)
    if auth_token is not None and await app.is_auth_token_valid(auth_token):
        return auth_token
    raise AuthenticationError


async def get_optional_auth_token(
    app: Annotated[App, Depends(get_app)],
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)] = None,
    token_cookie: Annotated[str | None, Depends(cookie_scheme)] = None,
) -> AuthToken | None:
    """Like get_auth_token, but anonymous callers get None. A presented invalid token is still rejected."""
    auth_token = _presented_token(credentials, token_cookie)
    if auth_token is None:
        return None
    if not await app.is_auth_token_valid(auth_token):
        raise AuthenticationError
    return auth_token


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
AuthTokenDep = Annotated[AuthToken, Depends(get_auth_token)]
OptionalAuthTokenDep = Annotated[AuthToken | None, Depends(get_optional_auth_token)]
