from .article import Article, PARAGRAPH_SEPARATOR
from .query_state import DEFAULT_ERROR_MESSAGE, Failed, Loading, QueryState, Ready

__all__ = [
    "Article",
    "PARAGRAPH_SEPARATOR",
    "DEFAULT_ERROR_MESSAGE",
    "Failed",
    "Loading",
    "QueryState",
    "Ready",
]
