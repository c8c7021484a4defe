from bloglist.core.core import Service
from bloglist.core.modules.blog.models import Blog
from bloglist.core.modules.session.models import AuthToken
from bloglist.core.modules.user.models import User
from bloglist.errors import AccessDeniedError, AuthenticationError


class AccessService(Service):
    async def ensure_authenticated(self, auth_token: AuthToken | None) -> User:
        """Ensure the caller is authenticated."""
        if auth_token is None:
            raise AuthenticationError("Authentication required")
        return await self.core.services.session.get_authenticated_user(auth_token)

    async def ensure_blog_owner(self, auth_token: AuthToken | None, blog_id: str) -> Blog:
        """Authenticate, load the blog, then check that the caller owns it.

        Blogs created without an owner cannot be modified by anyone.
        """
        user = await self.ensure_authenticated(auth_token)
        blog = await self.core.services.blog.get_blog(blog_id)
        if blog.user is None or blog.user != user.id:
            raise AccessDeniedError(f"Access denied: user '{user.id}' does not own blog '{blog.id}'")
        return blog
