from .base import *

DEBUG = True
ALLOWED_HOSTS = ["*"]

INTERNAL_IPS = [
    "127.0.0.1",
]

# 로컬에서는 apps.* DEBUG 로그까지
LOGGING["loggers"] = {
    "apps": {
        "handlers": ["console"],
        "level": "DEBUG",
        "propagate": False,
    },
}
