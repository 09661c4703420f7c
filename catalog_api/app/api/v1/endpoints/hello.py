"""
Greeting endpoint for API v1.

A trivial route that clients can use to check the service is up.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from catalog_api.app.schemas.hello import HelloRead

router = APIRouter()


@router.get("", response_model=HelloRead)
async def hello() -> HelloRead:
    return HelloRead(
        message="Hello from the Catalog API!",
        method="GET",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.post("", response_model=HelloRead, response_model_exclude_none=True)
async def hello_post() -> HelloRead:
    # The request body, if any, is ignored.
    return HelloRead(message="POST request received", method="POST")
