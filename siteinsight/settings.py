# siteinsight/settings.py
"""
SiteInsight Django settings

Everything deployment-specific comes from the environment; a .env file at the
project root (or one level up) is loaded first when present.
"""

from pathlib import Path
import os
from dotenv import load_dotenv

# ========= Base / Env =========
BASE_DIR = Path(__file__).resolve().parent.parent

ENV_CANDIDATES = [
    BASE_DIR / '.env',           # Local: project root
    BASE_DIR.parent / '.env',    # Local: repo root (if nested)
]
for _env in ENV_CANDIDATES:
    if _env.exists():
        load_dotenv(_env)
        break
else:
    load_dotenv()  # no-op if missing


def _env_bool(name, default="False"):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


DEBUG = _env_bool("DEBUG")

# ========= Secret Key =========
SECRET_KEY = os.getenv('DJANGO_SECRET_KEY')
if not SECRET_KEY:
    if not DEBUG:
        raise ValueError("DJANGO_SECRET_KEY must be set in .env file")
    from django.core.management.utils import get_random_secret_key
    SECRET_KEY = get_random_secret_key()

# ========= Hosts / Security =========
ALLOWED_HOSTS = [
    "127.0.0.1",
    "localhost",
    "testserver",
] + (os.getenv("ADDITIONAL_HOSTS", "").split(",") if os.getenv("ADDITIONAL_HOSTS") else [])

SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
CSRF_COOKIE_SECURE = not DEBUG
SECURE_CONTENT_TYPE_NOSNIFF = True

if not DEBUG:
    SECURE_SSL_REDIRECT = True
    SECURE_HSTS_SECONDS = 31536000
    SECURE_HSTS_INCLUDE_SUBDOMAINS = True

# ========= Installed apps =========
INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
    "corsheaders",
    "rest_framework",
    "site_analyzer",
]

# ========= Middleware =========
MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "site_analyzer.middleware.SecurityHeadersMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
]

# ========= URL / Templates / WSGI =========
ROOT_URLCONF = "siteinsight.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    },
]

WSGI_APPLICATION = "siteinsight.wsgi.application"

# ========= Database =========
# Only used when SITE_ANALYZER_STORAGE=database
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
        "OPTIONS": {"timeout": 30},
    }
}

# ========= I18N =========
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# ========= Static =========
STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}

# ========= Defaults =========
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ========= REST framework =========
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
        "rest_framework.parsers.FormParser",
    ],
    "EXCEPTION_HANDLER": "site_analyzer.views.message_exception_handler",
}

# ========= CORS (external dashboard front-end) =========
CORS_ALLOWED_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]
for _o in os.getenv("CORS_ALLOWED_ORIGINS", "").split(","):
    _o = _o.strip()
    if _o and _o not in CORS_ALLOWED_ORIGINS:
        CORS_ALLOWED_ORIGINS.append(_o)
CORS_URLS_REGEX = r"^/api/.*$"

# ========= OpenAI =========
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

# ========= Site Analyzer =========
SITE_ANALYZER_OPENAI_MODEL = os.getenv("SITE_ANALYZER_OPENAI_MODEL", "gpt-4o")
SITE_ANALYZER_FETCH_TIMEOUT = float(os.getenv("SITE_ANALYZER_FETCH_TIMEOUT", "15"))
SITE_ANALYZER_LLM_TIMEOUT = float(os.getenv("SITE_ANALYZER_LLM_TIMEOUT", "30"))
SITE_ANALYZER_MAX_CONTENT_CHARS = int(os.getenv("SITE_ANALYZER_MAX_CONTENT_CHARS", "50000"))
SITE_ANALYZER_STORAGE = os.getenv("SITE_ANALYZER_STORAGE", "memory")
SITE_ANALYZER_BLOCK_PRIVATE_HOSTS = _env_bool("SITE_ANALYZER_BLOCK_PRIVATE_HOSTS", "True")

# ========= Logging =========
LOG_DIR = BASE_DIR / 'logs'
LOG_DIR.mkdir(exist_ok=True)

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'file': {
            'level': 'INFO',
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': LOG_DIR / 'site_analyzer.log',
            'maxBytes': 1024*1024*15,
            'backupCount': 10,
            'formatter': 'verbose',
            'encoding': 'utf-8',
        },
        'console': {
            'level': 'INFO',
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'site_analyzer': {
            'handlers': ['file', 'console'],
            'level': os.getenv("SITE_ANALYZER_LOG_LEVEL", "INFO"),
            'propagate': True,
        },
        'django': {
            'handlers': ['file'],
            'level': 'ERROR',
            'propagate': True,
        },
    },
}
