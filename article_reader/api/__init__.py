"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from article_reader.api import app

    uvicorn article_reader.api:app --reload
"""

from article_reader.api.app import app, create_app

__all__ = ["app", "create_app"]
