"""DRF authentication backed by bearer tokens or the ``token`` cookie."""

import jwt
from django.core.exceptions import ValidationError
from rest_framework import authentication, exceptions

from accounts.models import User
from accounts.tokens import decode_token

COOKIE_NAME = "token"


class JWTAuthentication(authentication.BaseAuthentication):
    keyword = "Bearer"

    def authenticate(self, request):
        token = self._get_token(request)
        if token is None:
            return None

        try:
            claims = decode_token(token)
        except jwt.InvalidTokenError:
            raise exceptions.AuthenticationFailed("Token is not valid") from None

        try:
            user = User.objects.filter(pk=claims.get("id")).first()
        except (ValueError, ValidationError):
            raise exceptions.AuthenticationFailed("Token is not valid") from None
        if user is None or not user.is_active:
            raise exceptions.AuthenticationFailed("Token is not valid")
        return user, token

    def authenticate_header(self, request) -> str:
        return self.keyword

    def _get_token(self, request) -> str | None:
        header = authentication.get_authorization_header(request).decode("latin-1")
        if header:
            parts = header.split()
            if len(parts) == 2 and parts[0] == self.keyword:
                return parts[1]
            return None
        return request.COOKIES.get(COOKIE_NAME) or None
