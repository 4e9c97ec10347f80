"""테스트 설정 - SQLite + 로컬 메모리 캐시

SQLite는 행 잠금(select_for_update)이 없고 쓰기 시 테이블 전체를 잠그므로
공유 참가자 경기의 스레드 동시 반영 테스트(TestConcurrentMatches)는 건너뜀.
동시성까지 검증하려면 PostgreSQL로 실행:

    DB_ENGINE=postgresql DB_NAME=... DB_USER=... DB_PASSWORD=... pytest
"""

import os

from .settings import *  # noqa: F403
from .settings import BASE_DIR, LOGGING

if os.getenv("DB_ENGINE", "sqlite") == "sqlite":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": str(BASE_DIR / "test_db.sqlite3"),
        }
    }

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    }
}

STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

ELO_DYNAMIC_K_FACTOR = False
ELO_DRAW_STREAK_POLICY = "preserve"

# caplog이 apps.* 로그를 받을 수 있도록 root로 전파
LOGGING = {
    **LOGGING,
    "loggers": {
        **LOGGING["loggers"],
        "apps": {"handlers": ["console"], "level": "DEBUG", "propagate": True},
    },
}
