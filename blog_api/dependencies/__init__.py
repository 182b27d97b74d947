from blog_api.dependencies.dependencies import (
    AuthContextDep,
    ContextDep,
    OwnPostContextDep,
    PostContextDep,
    PostServiceDep,
    check_own_post,
    get_auth_context,
    get_current_user,
    get_post_service,
    get_post_store,
    get_request_context,
    get_sanitizer,
    load_post,
    oauth2_scheme,
)

__all__ = [
    "AuthContextDep",
    "ContextDep",
    "OwnPostContextDep",
    "PostContextDep",
    "PostServiceDep",
    "check_own_post",
    "get_auth_context",
    "get_current_user",
    "get_post_service",
    "get_post_store",
    "get_request_context",
    "get_sanitizer",
    "load_post",
    "oauth2_scheme",
]
