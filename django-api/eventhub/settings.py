"""Django settings for the EventHub API."""

from pathlib import Path

from eventhub.config import get_settings

env = get_settings()

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = env.SECRET_KEY
DEBUG = env.DEBUG or env.is_development
ALLOWED_HOSTS = env.ALLOWED_HOSTS

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "corsheaders",
    "rest_framework",
    "accounts",
    "events",
    "bookings",
    "payments",
    "reviews",
    "notifications",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "corsheaders.middleware.CorsMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "eventhub.urls"
WSGI_APPLICATION = "eventhub.wsgi.application"
APPEND_SLASH = False

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

DATABASES = {
    "default": {
        "ENGINE": env.DB_ENGINE,
        "NAME": env.DB_NAME
        if env.DB_ENGINE != "django.db.backends.sqlite3"
        else BASE_DIR / env.DB_NAME,
        "USER": env.DB_USER,
        "PASSWORD": env.DB_PASSWORD,
        "HOST": env.DB_HOST,
        "PORT": env.DB_PORT,
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
AUTH_USER_MODEL = "accounts.User"

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.BCryptSHA256PasswordHasher",
    "django.contrib.auth.hashers.PBKDF2PasswordHasher",
]

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"

# CORS for the single-page frontend
CORS_ALLOWED_ORIGINS = [env.FRONTEND_URL]
CORS_ALLOW_CREDENTIALS = True

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "accounts.authentication.JWTAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "EXCEPTION_HANDLER": "common.handlers.exceptions.exception_handler",
    "COERCE_DECIMAL_TO_STRING": False,
}

# Email
if env.SMTP_USER:
    EMAIL_BACKEND = "django.core.mail.backends.smtp.EmailBackend"
else:
    EMAIL_BACKEND = "django.core.mail.backends.console.EmailBackend"
EMAIL_HOST = env.SMTP_HOST
EMAIL_PORT = env.SMTP_PORT
EMAIL_HOST_USER = env.SMTP_USER
EMAIL_HOST_PASSWORD = env.SMTP_PASSWORD
EMAIL_USE_TLS = env.SMTP_USE_TLS
DEFAULT_FROM_EMAIL = env.DEFAULT_FROM_EMAIL

JWT = {
    "SECRET": env.JWT_SECRET,
    "ALGORITHM": "HS256",
    "EXPIRE_DAYS": env.JWT_EXPIRE_DAYS,
    "COOKIE_EXPIRE_DAYS": env.JWT_COOKIE_EXPIRE_DAYS,
    "COOKIE_SECURE": env.APP_ENV == "production",
}

PAYMENT_GATEWAY = {
    "KEY_ID": env.RAZORPAY_KEY_ID,
    "KEY_SECRET": env.RAZORPAY_KEY_SECRET,
    "CURRENCY": env.PAYMENT_CURRENCY,
}

# Business rules
EVENTHUB = {
    "PLATFORM_FEE_RATE": "0.03",
    "PROCESSING_FEE": "2.50",
    "CANCELLATION_CUTOFF_HOURS": 24,
    "DEFAULT_PAGE_SIZE": 10,
    "NOTIFICATION_PAGE_SIZE": 50,
    "OTP_TTL_MINUTES": 10,
    "RESET_TOKEN_TTL_MINUTES": 10,
    "FRONTEND_URL": env.FRONTEND_URL,
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": env.LOG_LEVEL,
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
    },
}
