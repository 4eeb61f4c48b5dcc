import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Build paths
BASE_DIR = Path(__file__).resolve().parent.parent

# Security settings
SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "insecure-dev-key-change-me")
DEBUG = os.getenv("DJANGO_DEBUG", "True") == "True"

# When in DEBUG mode, allow all hosts for ease of development
if DEBUG:
    ALLOWED_HOSTS = ["*"]
else:
    ALLOWED_HOSTS = os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

# Port used by `manage.py runserver` when no address is given
PORT = int(os.getenv("PORT", "8080"))

# Upstream providers
QUOTE_PROVIDER_URL = os.getenv("QUOTE_PROVIDER_URL", "https://dummyjson.com/quotes/random")
IMAGE_PROVIDER_URL = os.getenv("IMAGE_PROVIDER_URL", "https://picsum.photos/800/600")

# Per-request timeout for each outbound call
UPSTREAM_TIMEOUT_SECONDS = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "10"))

# Deadline for the join of both leaf tasks; 0 disables it
AGGREGATOR_TIMEOUT_SECONDS = float(os.getenv("AGGREGATOR_TIMEOUT_SECONDS", "15")) or None

# Application definition
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    # Third party apps
    "rest_framework",
    "corsheaders",
    "drf_spectacular",  # OpenAPI 3.0 schema generator
    # Local apps
    "inspire_me",  # runserver honouring PORT
    "providers",  # Quote and image upstreams
    "aggregator",  # Fan-out/fan-in endpoint
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.common.CommonMiddleware",
    "inspire_me.middleware.RequestIDMiddleware",
    "inspire_me.middleware.RequestLoggingMiddleware",
]

# CORS settings
if DEBUG:
    CORS_ALLOW_ALL_ORIGINS = True  # Only in development
else:
    CORS_ALLOW_ALL_ORIGINS = False
    CORS_ALLOWED_ORIGINS = os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000").split(",")
    CORS_ALLOW_METHODS = [
        "GET",
        "OPTIONS",
    ]

ROOT_URLCONF = "inspire_me.urls"

WSGI_APPLICATION = "inspire_me.wsgi.application"

# No models are stored; the database only satisfies contrib.auth
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Default primary key field type
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# REST Framework settings
REST_FRAMEWORK = {
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "EXCEPTION_HANDLER": "rest_framework.views.exception_handler",
}

# DRF Spectacular settings
SPECTACULAR_SETTINGS = {
    "TITLE": "Inspire Me API",
    "DESCRIPTION": "A random quote and a random image, fetched in parallel",
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
    "SWAGGER_UI_SETTINGS": {
        "deepLinking": True,
        "displayOperationId": True,
        "docExpansion": "list",
    },
    "SORT_OPERATIONS": False,
}

LOG_DIR = Path(os.getenv("LOG_DIR", BASE_DIR / "logs"))

# Logging configuration
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {module} {process:d} {thread:d} {message}",
            "style": "{",
        },
        "json": {
            "()": "json_log_formatter.JSONFormatter",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
        "json_file": {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "filename": os.path.join(LOG_DIR, "inspire_me.json"),
            "when": "midnight",
            "interval": 1,
            "backupCount": 30,
            "formatter": "json",
        },
        "error_file": {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "filename": os.path.join(LOG_DIR, "error.log"),
            "when": "midnight",
            "interval": 1,
            "backupCount": 30,
            "formatter": "verbose",
            "level": "ERROR",
        },
    },
    "loggers": {
        "django": {
            "handlers": ["console", "json_file"],
            "level": "INFO",
        },
        "django.request": {
            "handlers": ["console", "error_file"],
            "level": "ERROR",
            "propagate": False,
        },
        "inspire_me": {
            "handlers": ["console", "json_file"],
            "level": "INFO",
            "propagate": False,
        },
        "providers": {
            "handlers": ["console", "json_file"],
            "level": os.getenv("PROVIDERS_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
        "aggregator": {
            "handlers": ["console", "json_file", "error_file"],
            "level": "INFO",
            "propagate": False,
        },
    },
    "root": {
        "handlers": ["console", "error_file"],
        "level": os.getenv("DJANGO_LOG_LEVEL", "WARNING"),
    },
}

# Security settings for production
if not DEBUG:
    SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
    SECURE_CONTENT_TYPE_NOSNIFF = True
    SECURE_REFERRER_POLICY = "strict-origin-when-cross-origin"

# Ensure we have a logs directory
os.makedirs(LOG_DIR, exist_ok=True)
