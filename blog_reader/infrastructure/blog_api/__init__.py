from .blog_api_client import BlogApiClient

__all__ = ["BlogApiClient"]
