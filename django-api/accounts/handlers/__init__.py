from accounts.handlers.views import (
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

__all__ = [
    "AvatarView",
    "ChangePasswordView",
    "DeactivateView",
    "ForgotPasswordView",
    "LoginView",
    "LogoutView",
    "MeView",
    "ProfileView",
    "PublicProfileView",
    "RegisterView",
    "ResendOtpView",
    "ResetPasswordView",
    "UserBookingListView",
    "UserEventListView",
    "UserStatsView",
    "VerifyEmailView",
    "VerifyOtpView",
]
