"""HTTP handlers for authentication and user profiles.

Handlers parse input, call AuthService and shape responses. Business rules
live in the service; domain errors are mapped by the shared exception
handler.
"""

from datetime import timedelta

from django.conf import settings
from django.utils import timezone
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.authentication import COOKIE_NAME
from accounts.handlers.actor import actor_for
from accounts.handlers.serializers import (
    AvatarSerializer,
    ChangePasswordSerializer,
    EmailSerializer,
    LoginSerializer,
    OtpSerializer,
    ProfileUpdateSerializer,
    RegisterSerializer,
    ResetPasswordSerializer,
    UserSerializer,
    profile_payload,
    stats_payload,
)
from accounts.models import User
from accounts.services.activity_service import UserActivityService
from accounts.services.auth_service import AuthService
from accounts.stores.django_store import DjangoUserStore
from accounts.tokens import issue_token
from bookings.handlers.serializers import BookingSerializer, StatusQuerySerializer
from bookings.stores.django_store import DjangoBookingStore
from common.handlers.pagination import page_request, paginated_response
from common.handlers.requests import validated_data
from events.handlers.serializers import EventSummarySerializer
from events.stores.django_store import DjangoEventStore
from notifications.mailer import Mailer


def get_auth_service() -> AuthService:
    return AuthService(DjangoUserStore(), Mailer())


def get_activity_service() -> UserActivityService:
    return UserActivityService(DjangoUserStore(), DjangoEventStore(), DjangoBookingStore())


def token_response(user: User, status_code: int = status.HTTP_200_OK) -> Response:
    token = issue_token(user.pk)
    response = Response(
        {
            "success": True,
            "token": token,
            "user": {
                "id": str(user.pk),
                "firstName": user.first_name,
                "lastName": user.last_name,
                "email": user.email,
                "role": user.role,
                "avatar": user.avatar,
                "isVerified": user.is_verified,
            },
        },
        status=status_code,
    )
    config = settings.JWT
    response.set_cookie(
        COOKIE_NAME,
        token,
        expires=timezone.now() + timedelta(days=config["COOKIE_EXPIRE_DAYS"]),
        httponly=True,
        secure=config["COOKIE_SECURE"],
    )
    return response


class RegisterView(APIView):
    """Handler for POST /api/auth/register"""

    def post(self, request: Request) -> Response:
        data = validated_data(RegisterSerializer, request.data)
        user = get_auth_service().register(**data)
        return Response(
            {
                "success": True,
                "message": "Registration successful. Please verify your email with the OTP sent.",
                "userId": str(user.pk),
            },
            status=status.HTTP_201_CREATED,
        )


class VerifyOtpView(APIView):
    """Handler for POST /api/auth/verify-otp"""

    def post(self, request: Request) -> Response:
        data = validated_data(OtpSerializer, request.data)
        get_auth_service().verify_otp(data["email"], data["otp"])
        return Response({"success": True, "message": "Email verified successfully"})


class ResendOtpView(APIView):
    """Handler for POST /api/auth/resend-otp"""

    def post(self, request: Request) -> Response:
        data = validated_data(EmailSerializer, request.data)
        get_auth_service().resend_otp(data["email"])
        return Response({"success": True, "message": "OTP resent successfully"})


class LoginView(APIView):
    """Handler for POST /api/auth/login"""

    def post(self, request: Request) -> Response:
        data = validated_data(LoginSerializer, request.data)
        user = get_auth_service().login(data["email"], data["password"])
        return token_response(user)


class LogoutView(APIView):
    """Handler for POST /api/auth/logout"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request) -> Response:
        response = Response({"success": True, "message": "User logged out successfully"})
        response.delete_cookie(COOKIE_NAME)
        return response


class MeView(APIView):
    """Handler for GET /api/auth/me"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        return Response({"success": True, "user": UserSerializer(request.user).data})


class ProfileView(APIView):
    """Handler for PUT /api/auth/profile and PUT /api/users/profile"""

    permission_classes = [IsAuthenticated]

    def put(self, request: Request) -> Response:
        changes = validated_data(ProfileUpdateSerializer, request.data)
        user = get_auth_service().update_profile(request.user, changes)
        return Response({"success": True, "user": UserSerializer(user).data})


class ChangePasswordView(APIView):
    """Handler for PUT /api/auth/change-password"""

    permission_classes = [IsAuthenticated]

    def put(self, request: Request) -> Response:
        data = validated_data(ChangePasswordSerializer, request.data)
        user = get_auth_service().change_password(
            request.user, data["currentPassword"], data["newPassword"]
        )
        return token_response(user)


class ForgotPasswordView(APIView):
    """Handler for POST /api/auth/forgot-password"""

    def post(self, request: Request) -> Response:
        data = validated_data(EmailSerializer, request.data)
        reset_url_base = request.build_absolute_uri("/api/auth/reset-password/")
        get_auth_service().forgot_password(data["email"], reset_url_base)
        return Response({"success": True, "message": "Email sent successfully"})


class ResetPasswordView(APIView):
    """Handler for PUT /api/auth/reset-password/{token}"""

    def put(self, request: Request, token: str) -> Response:
        data = validated_data(ResetPasswordSerializer, request.data)
        user = get_auth_service().reset_password(token, data["password"])
        return token_response(user)


class VerifyEmailView(APIView):
    """Handler for GET /api/auth/verify/{token}"""

    def get(self, request: Request, token: str) -> Response:
        get_auth_service().verify_email(token)
        return Response({"success": True, "message": "Email verified successfully"})


class PublicProfileView(APIView):
    """Handler for GET /api/users/{user_id}/profile"""

    def get(self, request: Request, user_id: str) -> Response:
        profile = get_activity_service().profile(user_id)
        return Response({"success": True, "user": profile_payload(profile)})


class AvatarView(APIView):
    """Handler for PUT /api/users/avatar"""

    permission_classes = [IsAuthenticated]

    def put(self, request: Request) -> Response:
        data = validated_data(AvatarSerializer, request.data)
        user = get_auth_service().update_avatar(request.user, data["avatar"])
        return Response({"success": True, "user": UserSerializer(user).data})


class DeactivateView(APIView):
    """Handler for PUT /api/users/deactivate"""

    permission_classes = [IsAuthenticated]

    def put(self, request: Request) -> Response:
        get_auth_service().deactivate(request.user)
        response = Response({"success": True, "message": "Account deactivated successfully"})
        response.delete_cookie(COOKIE_NAME)
        return response


class UserEventListView(APIView):
    """Handler for GET /api/users/{user_id}/events and GET /api/users/events"""

    def get_permissions(self):
        if "user_id" in self.kwargs:
            return [AllowAny()]
        return [IsAuthenticated()]

    def get(self, request: Request, user_id: str | None = None) -> Response:
        page = page_request(request)
        actor = actor_for(request) if request.user.is_authenticated else None
        result = get_activity_service().user_events(
            actor, user_id or actor.id, request.query_params.get("status"), page
        )
        items = EventSummarySerializer(result.items, many=True).data
        return paginated_response(items, result.total, page, "events")


class UserBookingListView(APIView):
    """Handler for GET /api/users/{user_id}/bookings and GET /api/users/bookings"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request, user_id: str | None = None) -> Response:
        page = page_request(request)
        query = validated_data(StatusQuerySerializer, request.query_params)
        actor = actor_for(request)
        result = get_activity_service().user_bookings(
            actor, user_id or actor.id, query.get("status"), page
        )
        items = BookingSerializer(result.items, many=True).data
        return paginated_response(items, result.total, page, "bookings")


class UserStatsView(APIView):
    """Handler for GET /api/users/stats"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        stats = get_activity_service().stats(actor_for(request))
        return Response({"success": True, "stats": stats_payload(stats)})
