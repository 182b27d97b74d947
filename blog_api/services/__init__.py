from blog_api.services.posts import PostPage, PostService
from blog_api.services.sanitizer import HtmlSanitizer, Sanitizer, shorten
from blog_api.services.validator import SchemaValidator, Validator

__all__ = [
    "HtmlSanitizer",
    "PostPage",
    "PostService",
    "Sanitizer",
    "SchemaValidator",
    "Validator",
    "shorten",
]
