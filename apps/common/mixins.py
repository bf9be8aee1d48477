"""View mixins shared across apps."""

from rest_framework.permissions import AllowAny


class PublicMethodsMixin:
    """
    Serve the HTTP methods in ``public_methods`` without a session token.

    Those methods skip token authentication entirely (a stale header cannot
    break a public read) and are open to anonymous callers; every other
    method keeps the view's normal authentication and permissions.
    """

    public_methods = ()

    def get_authenticators(self):
        if self.request.method in self.public_methods:
            return []
        return super().get_authenticators()

    def get_permissions(self):
        if self.request.method in self.public_methods:
            return [AllowAny()]
        return super().get_permissions()
