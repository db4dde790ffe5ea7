# ArticleStore is imported from reader_kit.articles.store: the template
# generator depends on Article, and the store depends on the generator.
from .models import Article, utcnow

__all__ = [
    "Article",
    "utcnow",
]
