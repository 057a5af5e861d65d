"""Request validation and response shaping for identity endpoints."""

import re

from rest_framework import serializers

from accounts.models import User

PASSWORD_RULE = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)")
PASSWORD_MESSAGE = (
    "Password must contain at least one uppercase letter, one lowercase letter, and one number"
)


def validate_strong_password(value: str) -> str:
    if len(value) < 6:
        raise serializers.ValidationError("Password must be at least 6 characters")
    if not PASSWORD_RULE.match(value):
        raise serializers.ValidationError(PASSWORD_MESSAGE)
    return value


class RegisterSerializer(serializers.Serializer):
    firstName = serializers.CharField(min_length=2, max_length=50, source="first_name")
    lastName = serializers.CharField(min_length=2, max_length=50, source="last_name")
    email = serializers.EmailField()
    password = serializers.CharField(validators=[validate_strong_password])
    role = serializers.ChoiceField(choices=User.Role.choices, default=User.Role.ATTENDEE)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True, default="")


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField()


class OtpSerializer(serializers.Serializer):
    email = serializers.EmailField()
    otp = serializers.CharField(max_length=6)


class EmailSerializer(serializers.Serializer):
    email = serializers.EmailField()


class ProfileUpdateSerializer(serializers.Serializer):
    firstName = serializers.CharField(min_length=2, max_length=50, source="first_name", required=False)
    lastName = serializers.CharField(min_length=2, max_length=50, source="last_name", required=False)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True)
    bio = serializers.CharField(max_length=500, required=False, allow_blank=True)
    location = serializers.CharField(max_length=255, required=False, allow_blank=True)
    preferences = serializers.DictField(required=False)


class ChangePasswordSerializer(serializers.Serializer):
    currentPassword = serializers.CharField()
    newPassword = serializers.CharField(validators=[validate_strong_password])


class ResetPasswordSerializer(serializers.Serializer):
    password = serializers.CharField(validators=[validate_strong_password])


class AvatarSerializer(serializers.Serializer):
    avatar = serializers.URLField(max_length=500)


class UserSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    firstName = serializers.CharField(source="first_name")
    lastName = serializers.CharField(source="last_name")
    email = serializers.EmailField()
    role = serializers.CharField()
    phone = serializers.CharField()
    avatar = serializers.CharField()
    bio = serializers.CharField()
    location = serializers.CharField()
    preferences = serializers.DictField()
    isVerified = serializers.BooleanField(source="is_verified")
    createdAt = serializers.DateTimeField(source="date_joined")
    lastLogin = serializers.DateTimeField(source="last_login")


class PublicProfileSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    firstName = serializers.CharField(source="first_name")
    lastName = serializers.CharField(source="last_name")
    avatar = serializers.CharField()
    bio = serializers.CharField()
    location = serializers.CharField()
    role = serializers.CharField()
    createdAt = serializers.DateTimeField(source="date_joined")


def profile_payload(profile) -> dict:
    user = dict(PublicProfileSerializer(profile.user).data)
    user["stats"] = {
        "totalEvents": profile.stats.total_events,
        "totalTicketsSold": profile.stats.total_tickets_sold,
    }
    return user


def stats_payload(stats) -> dict:
    bookings, events = stats.bookings, stats.events
    return {
        "bookings": {
            "totalBookings": bookings.total_bookings,
            "totalSpent": bookings.total_spent,
            "upcomingBookings": bookings.upcoming_bookings,
        },
        "events": {
            "totalEvents": events.total_events,
            "totalTicketsSold": events.total_tickets_sold,
            "upcomingEvents": events.upcoming_events,
        },
    }
