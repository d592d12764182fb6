from bloglist.configs.settings import (
    API_PREFIX,
    DEFAULT_ERROR_MESSAGE,
    MAX_TITLE_LENGTH,
    MAX_URL_LENGTH,
    MAX_USERNAME_LENGTH,
    MIN_PASSWORD_LENGTH,
    MIN_USERNAME_LENGTH,
    Settings,
    settings,
)

__all__ = [
    "API_PREFIX",
    "DEFAULT_ERROR_MESSAGE",
    "MAX_TITLE_LENGTH",
    "MAX_URL_LENGTH",
    "MAX_USERNAME_LENGTH",
    "MIN_PASSWORD_LENGTH",
    "MIN_USERNAME_LENGTH",
    "Settings",
    "settings",
]
