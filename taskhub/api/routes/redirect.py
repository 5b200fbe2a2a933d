"""Short link redirection endpoint."""

from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request, status
from starlette.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from taskhub.api.dependencies import get_redirect_resolver
from taskhub.core.decorators import log_url_access_decorator
from taskhub.db.session import get_db
from taskhub.services.exceptions import URLNotFoundError
from taskhub.services.redirect import RedirectResolver

router = APIRouter(tags=["redirect"])


def location_header(url: str) -> str:
    """Percent-encode the non-ASCII characters of a URL and leave the rest untouched."""
    return "".join(ch if ord(ch) < 128 else quote(ch, safe="") for ch in url)


@router.get(
    "/{short_code}",
    status_code=status.HTTP_302_FOUND,
    responses={
        302: {"description": "Redirect to the original URL"},
        404: {"description": "Shortened URL not found"},
    }
)
@log_url_access_decorator()
async def redirect_to_original_url(
    request: Request,
    short_code: str,
    db: AsyncSession = Depends(get_db),
    resolver: RedirectResolver = Depends(get_redirect_resolver),
):
    """Redirect to the original URL with a temporary (302) redirect.

    ``Location`` is the stored URL byte for byte, except that non-ASCII
    characters are percent-encoded.
    """
    try:
        original_url = await resolver.resolve(db, short_code)
    except URLNotFoundError as e:
        logger.debug("Short code not resolved", short_code=short_code, reason=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Shortened URL not found")
    return Response(
        status_code=status.HTTP_302_FOUND,
        headers={"location": location_header(original_url)},
    )
