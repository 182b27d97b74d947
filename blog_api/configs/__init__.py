from blog_api.configs.settings import (
    ALLOWED_ATTRIBUTES,
    ALLOWED_SCHEMES,
    ALLOWED_TAGS,
    EXCERPT_LENGTH,
    EXCERPT_SUFFIX,
    MAX_PAGE,
    NON_TEXT_TAGS,
    PAGE_SIZE,
    file_logger,
    settings,
)

__all__ = [
    "ALLOWED_ATTRIBUTES",
    "ALLOWED_SCHEMES",
    "ALLOWED_TAGS",
    "EXCERPT_LENGTH",
    "EXCERPT_SUFFIX",
    "MAX_PAGE",
    "NON_TEXT_TAGS",
    "PAGE_SIZE",
    "file_logger",
    "settings",
]
