from .article_gateway import ArticleGateway

__all__ = ["ArticleGateway"]
