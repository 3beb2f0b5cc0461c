from functools import lru_cache

from ..author_store import AuthorStore, SqlAuthorStore
from ..db_connection import get_engine


@lru_cache
def get_author_store() -> AuthorStore:
    # create_engine only parses the URL; the first query connects
    return SqlAuthorStore(get_engine())
