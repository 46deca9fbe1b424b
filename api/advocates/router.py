"""
Advocates API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from . import schemas, service

router = APIRouter()


@router.get(
    "/api/advocates",
    response_model=schemas.AdvocatesResponse,
    responses={500: {"model": schemas.ErrorResponse}},
)
async def list_advocates():
    try:
        advocates = await service.list_advocates()
    except service.AdvocateQueryError as exc:
        return JSONResponse(status_code=500, content={"error": str(exc)})
    return {"data": [a.model_dump(by_alias=True) for a in advocates]}
