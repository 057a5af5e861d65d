from django.urls import path

from accounts.handlers import (
    AvatarView,
    ChangePasswordView,
    DeactivateView,
    ForgotPasswordView,
    LoginView,
    LogoutView,
    MeView,
    ProfileView,
    PublicProfileView,
    RegisterView,
    ResendOtpView,
    ResetPasswordView,
    UserBookingListView,
    UserEventListView,
    UserStatsView,
    VerifyEmailView,
    VerifyOtpView,
)

urlpatterns = [
    path("auth/register", RegisterView.as_view(), name="auth-register"),
    path("auth/login", LoginView.as_view(), name="auth-login"),
    path("auth/logout", LogoutView.as_view(), name="auth-logout"),
    path("auth/me", MeView.as_view(), name="auth-me"),
    path("auth/profile", ProfileView.as_view(), name="auth-profile"),
    path("auth/change-password", ChangePasswordView.as_view(), name="auth-change-password"),
    path("auth/forgot-password", ForgotPasswordView.as_view(), name="auth-forgot-password"),
    path("auth/reset-password/<str:token>", ResetPasswordView.as_view(), name="auth-reset-password"),
    path("auth/verify/<str:token>", VerifyEmailView.as_view(), name="auth-verify-email"),
    path("auth/verify-otp", VerifyOtpView.as_view(), name="auth-verify-otp"),
    path("auth/resend-otp", ResendOtpView.as_view(), name="auth-resend-otp"),
    path("users/profile", ProfileView.as_view(), name="user-profile-update"),
    path("users/avatar", AvatarView.as_view(), name="user-avatar"),
    path("users/deactivate", DeactivateView.as_view(), name="user-deactivate"),
    path("users/stats", UserStatsView.as_view(), name="user-stats"),
    path("users/events", UserEventListView.as_view(), name="user-own-events"),
    path("users/bookings", UserBookingListView.as_view(), name="user-own-bookings"),
    path("users/<uuid:user_id>/profile", PublicProfileView.as_view(), name="user-public-profile"),
    path("users/<uuid:user_id>/events", UserEventListView.as_view(), name="user-events"),
    path("users/<uuid:user_id>/bookings", UserBookingListView.as_view(), name="user-bookings"),
]
