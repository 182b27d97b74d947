# blog_api/main.py

"""Blog Posts API - CRUD handlers for blog posts."""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from blog_api.configs import settings
from blog_api.errors import (
    DatabaseError,
    PostError,
    database_exception_handler,
    posts_exception_handler,
    validation_exception_handler,
)
from blog_api.middleware import (
    LoggingMiddleware,
    RequestIdMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from blog_api.monitoring import configure_logging
from blog_api.routes import posts_router

configure_logging()

app = FastAPI(
    title=settings.APP_NAME,
    description="Create, list, read, update and delete blog posts",
    version="1.0.0",
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestIdMiddleware)

routes = [
    posts_router,
]

_ = [app.include_router(router) for router in routes]

errors = [
    (PostError, posts_exception_handler),
    (DatabaseError, database_exception_handler),
    (RequestValidationError, validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]
