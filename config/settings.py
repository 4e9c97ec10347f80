"""
Django 설정 파일 (config 프로젝트)

Django 6.0의 'django-admin startproject' 명령으로 생성됨.

이 파일에 대한 자세한 정보:
https://docs.djangoproject.com/en/6.0/topics/settings/

전체 설정 목록 및 값:
https://docs.djangoproject.com/en/6.0/ref/settings/
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# 환경 변수 로드
load_dotenv()

# 프로젝트 기본 경로 설정: BASE_DIR / 'subdir' 형태로 사용
BASE_DIR = Path(__file__).resolve().parent.parent


# 보안 경고: 프로덕션 환경에서는 시크릿 키를 반드시 비밀로 유지할 것!
SECRET_KEY = os.getenv(
    "SECRET_KEY", "django-insecure-q3v!8m^r2x@k7e0zt#w1c$h9p(5n)j6l_b4f+ys=ud-ao*gi%"
)

# 보안 경고: 프로덕션 환경에서는 DEBUG를 켜지 말 것!
DEBUG = os.getenv("DEBUG", "True") == "True"

ALLOWED_HOSTS = os.getenv("ALLOWED_HOSTS", "*").split(",")


# 애플리케이션 정의

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "drf_spectacular",
    "corsheaders",
    "apps.accounts",
    "apps.ratings",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "corsheaders.middleware.CorsMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "config.urls"

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

WSGI_APPLICATION = "config.wsgi.application"
ASGI_APPLICATION = "config.asgi.application"


# 데이터베이스
# https://docs.djangoproject.com/en/6.0/ref/settings/#databases
# DB_ENGINE=sqlite 로 로컬 파일 DB 사용 가능 (테스트 기본값)

DB_ENGINE = os.getenv("DB_ENGINE", "postgresql")

if DB_ENGINE == "sqlite":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": os.getenv("DB_NAME", str(BASE_DIR / "db.sqlite3")),
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": os.getenv("DB_NAME", "crosseddb"),
            "USER": os.getenv("DB_USER", "postgres"),
            "PASSWORD": os.getenv("DB_PASSWORD", "postgres"),
            "HOST": os.getenv("DB_HOST", "localhost"),  # 하이브리드: localhost, Docker: "db"
            "PORT": os.getenv("DB_PORT", "5432"),
        }
    }


AUTH_PASSWORD_VALIDATORS = []


# 국제화 (i18n)

LANGUAGE_CODE = "ko-kr"

TIME_ZONE = "UTC"

USE_I18N = True

USE_TZ = True


# 정적 파일

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Redis 캐시 설정 (리더보드 응답 캐시)
REDIS_HOST = os.getenv("REDIS_HOST", "localhost")
REDIS_PORT = os.getenv("REDIS_PORT", "6379")

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.redis.RedisCache",
        "LOCATION": f"redis://{REDIS_HOST}:{REDIS_PORT}/1",
    }
}

# CORS 설정
CORS_ALLOW_ALL_ORIGINS = DEBUG
CORS_ALLOWED_ORIGINS = os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:8081").split(",")

# WhiteNoise 설정
STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage",
    },
}

# 인증 설정
AUTH_USER_MODEL = "accounts.User"

# Django REST Framework 설정
REST_FRAMEWORK = {
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework.authentication.SessionAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticatedOrReadOnly",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
}

# Swagger/OpenAPI 설정
SPECTACULAR_SETTINGS = {
    "TITLE": "Crossed Rating API",
    "DESCRIPTION": "Elo 레이팅 및 게임 통계 API",
    "VERSION": "0.1.0",
    "SERVE_INCLUDE_SCHEMA": False,
    "SCHEMA_PATH_PREFIX": r"/api",
}

# 로깅 설정
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "[{asctime}] {levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "django": {"handlers": ["console"], "level": "WARNING"},
        "apps": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}

# Elo 레이팅 설정
ELO_DEFAULT_RATING = int(os.getenv("ELO_DEFAULT_RATING", "1200"))
ELO_K_FACTOR = int(os.getenv("ELO_K_FACTOR", "32"))
ELO_RATING_FLOOR = int(os.getenv("ELO_RATING_FLOOR", "100"))
ELO_RATING_CEILING = int(os.getenv("ELO_RATING_CEILING", "4000"))

# 동적 K-factor (게임 수 감쇠 + 연승 보너스), 기본 비활성
ELO_DYNAMIC_K_FACTOR = os.getenv("ELO_DYNAMIC_K_FACTOR", "False") == "True"
ELO_WIN_STREAK_MULTIPLIER = float(os.getenv("ELO_WIN_STREAK_MULTIPLIER", "0.1"))
ELO_MAX_WIN_STREAK_BONUS = float(os.getenv("ELO_MAX_WIN_STREAK_BONUS", "0.5"))
ELO_GAMES_PLAYED_DAMPENING = int(os.getenv("ELO_GAMES_PLAYED_DAMPENING", "30"))

# 동시 수정 충돌 시 재시도 횟수
ELO_MAX_UPDATE_RETRIES = int(os.getenv("ELO_MAX_UPDATE_RETRIES", "3"))

# 무승부 시 연승 처리: "preserve" (유지) 또는 "reset" (초기화)
ELO_DRAW_STREAK_POLICY = os.getenv("ELO_DRAW_STREAK_POLICY", "preserve")

# 리더보드 캐시 TTL (초)
LEADERBOARD_CACHE_TTL = int(os.getenv("LEADERBOARD_CACHE_TTL", "30"))
