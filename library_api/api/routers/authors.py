import logging

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse

from ...author_store import AuthorStore
from ..deps import get_author_store

logger = logging.getLogger(__name__)

router = APIRouter()

SORT_BY_FAMILY_NAME = {"family_name": 1}


@router.get("", response_class=JSONResponse)
async def list_authors(store: AuthorStore = Depends(get_author_store)):
    """List every author sorted by family name.

    The store does the sorting; records are passed through unchanged.
    """
    try:
        authors = await store.get_all_authors(dict(SORT_BY_FAMILY_NAME))
    except Exception:
        logger.exception("Failed to fetch authors")
        return PlainTextResponse("Internal Server Error", status_code=500)

    if not authors:
        return PlainTextResponse("No authors found")
    return JSONResponse(content=jsonable_encoder(authors))
