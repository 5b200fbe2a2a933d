"""Short link submission and listing endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Form, HTTPException, status
from fastapi.responses import PlainTextResponse
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.api import schemas
from taskhub.api.dependencies import get_shortener_service
from taskhub.api.params import LimitParam, SkipParam
from taskhub.db.session import get_db
from taskhub.services.exceptions import (
    InvalidURLError,
    RecordRetrievalError,
    URLCreationError,
)
from taskhub.services.shortener import ShortenerService

router = APIRouter(tags=["shortener"])


@router.post(
    "/submit-url",
    response_class=PlainTextResponse,
    responses={
        400: {"model": schemas.ErrorResponse, "description": "Invalid URL"},
        500: {"model": schemas.ErrorResponse, "description": "Short link could not be stored"}
    }
)
async def submit_url(
    url: str = Form("", description="Absolute http or https URL to shorten"),
    user_creator_id: Optional[int] = Form(None, description="Id of the creating user"),
    db: AsyncSession = Depends(get_db),
    shortener_service: ShortenerService = Depends(get_shortener_service),
):
    """Shorten a URL submitted as a form field."""
    try:
        short_url = await shortener_service.submit(db, url, creator_id=user_creator_id)
    except InvalidURLError as e:
        logger.info("Rejected URL submission", reason=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid URL format")
    except URLCreationError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error inserting URL into database: {e}"
        )
    return PlainTextResponse(f"Shortened URL: {short_url}")


@router.get(
    "/urls",
    response_model=List[schemas.ShortLinkRead]
)
async def list_short_links(
    skip: int = SkipParam(),
    limit: int = LimitParam(),
    db: AsyncSession = Depends(get_db),
    shortener_service: ShortenerService = Depends(get_shortener_service),
):
    try:
        links = await shortener_service.list_short_links(db, skip=skip, limit=limit)
    except RecordRetrievalError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return [schemas.ShortLinkRead.model_validate(link) for link in links]
