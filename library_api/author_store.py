"""
Data access for author records.

`AuthorStore` is the interface the routes depend on; `SqlAuthorStore` is the
SQLAlchemy implementation used by the running service. Tests substitute their
own store through FastAPI's dependency overrides.
"""
import logging
from typing import Any, Mapping, Protocol, Sequence

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.concurrency import run_in_threadpool

from .exceptions import DataAccessFailure
from .models.author import AUTHOR_COLUMNS, create_schema
from .schemas.author import AuthorOut

logger = logging.getLogger(__name__)

SORT_DIRECTIONS = {1: "ASC", -1: "DESC"}


class AuthorStore(Protocol):
    async def get_all_authors(self, sort_spec: Mapping[str, int]) -> Sequence[Any]:
        ...


def build_order_clause(sort_spec: Mapping[str, int]) -> str:
    """Translate `{"family_name": 1}` style specs into an ORDER BY clause.

    Only stored columns are accepted and directions must be 1 or -1.
    """
    clauses = []
    for field, direction in sort_spec.items():
        if field not in AUTHOR_COLUMNS:
            raise ValueError(f"Cannot sort authors by unknown field '{field}'. Allowed: {AUTHOR_COLUMNS}")
        # bools and floats compare equal to 1 but are not valid directions
        if type(direction) is not int or direction not in SORT_DIRECTIONS:
            raise ValueError(f"Invalid sort direction {direction!r} for '{field}'. Use 1 or -1.")
        clauses.append(f"{field} {SORT_DIRECTIONS[direction]}")
    if not clauses:
        return ""
    return " ORDER BY " + ", ".join(clauses)


def _year(value) -> str:
    # MySQL hands back date objects, SQLite hands back ISO strings
    if value is None:
        return ""
    if hasattr(value, "year"):
        return str(value.year)
    return str(value).strip()[:4]


def format_name(first_name: str | None, family_name: str | None) -> str:
    if first_name and family_name:
        return f"{family_name}, {first_name}"
    return ""


def format_lifespan(date_of_birth, date_of_death) -> str:
    return f"{_year(date_of_birth)} - {_year(date_of_death)}"


def row_to_author(row: Mapping[str, Any]) -> AuthorOut:
    return AuthorOut(
        id=row["author_id"],
        name=format_name(row.get("first_name"), row.get("family_name")),
        lifespan=format_lifespan(row.get("date_of_birth"), row.get("date_of_death")),
    )


class SqlAuthorStore:
    """Reads authors through a SQLAlchemy engine.

    The `authors` table is created on first use when `ensure_schema` is set,
    so constructing the store never touches the database.
    """

    def __init__(self, engine, ensure_schema: bool = True):
        self.engine = engine
        self._schema_ready = not ensure_schema

    def _fetch_authors(self, order_clause: str) -> list[AuthorOut]:
        query = text(f"SELECT {', '.join(AUTHOR_COLUMNS)} FROM authors{order_clause}")
        try:
            if not self._schema_ready:
                create_schema(self.engine)
                self._schema_ready = True
            with self.engine.connect() as conn:
                rows = conn.execute(query).mappings().all()
        except SQLAlchemyError as exc:
            raise DataAccessFailure("Could not read authors from the database") from exc
        return [row_to_author(r) for r in rows]

    async def get_all_authors(self, sort_spec: Mapping[str, int]) -> list[AuthorOut]:
        order_clause = build_order_clause(sort_spec)
        authors = await run_in_threadpool(self._fetch_authors, order_clause)
        logger.debug("Fetched %d authors (sort=%s)", len(authors), dict(sort_spec))
        return authors
