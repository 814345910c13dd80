from .article import ArticleCreate, ArticleForm, ArticleResponse, parse_categories

__all__ = [
    "ArticleCreate",
    "ArticleForm",
    "ArticleResponse",
    "parse_categories",
]
