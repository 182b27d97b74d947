from blog_api.routes.posts import router as posts_router

__all__ = ["posts_router"]
