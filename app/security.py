import logging
import secrets
from typing import Optional

from fastapi import Depends, HTTPException, Security
from fastapi.security.api_key import APIKeyHeader
from starlette.status import HTTP_403_FORBIDDEN

from app.settings import Settings, settings

logger = logging.getLogger(__name__)

CONTENT_KEY_HEADER = "X-Content-Key"
content_key_header = APIKeyHeader(name=CONTENT_KEY_HEADER, auto_error=False)


def get_settings() -> Settings:
    return settings


def require_content_key(
    supplied_key: Optional[str] = Security(content_key_header),
    current_settings: Settings = Depends(get_settings),
) -> str:
    """Reject requests whose X-Content-Key header does not match CONTENT_API_KEY."""
    expected = current_settings.CONTENT_API_KEY
    if supplied_key is not None and secrets.compare_digest(
        supplied_key.encode(), expected.encode()
    ):
        return supplied_key

    logger.warning(
        "Rejected content request: "
        + ("missing key header" if supplied_key is None else "key mismatch")
    )
    raise HTTPException(status_code=HTTP_403_FORBIDDEN, detail="Invalid content key")
