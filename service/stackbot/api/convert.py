from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from stackbot.config import get_settings
from stackbot.services import ParseError, convert, parse_quantity

router = APIRouter(tags=["convert"])


class ConvertResponse(BaseModel):
    query: str
    stack_size: int
    item_count: int
    result: str = Field(..., description="Breakdown, e.g. 10LC+6st+56")


@router.get("/convert", response_model=ConvertResponse)
async def convert_quantity(
    q: str = Query(..., description="COUNT or COUNT@STACK, e.g. 1234@32")
):
    """
    Convert an item count into a LC/c/st breakdown.

    Same input as the chat trigger, without the trailing "?=".
    """
    settings = get_settings()

    try:
        parsed = parse_quantity(q, default_stack_size=settings.default_stack_size)
    except ParseError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return ConvertResponse(
        query=q,
        stack_size=parsed.stack_size,
        item_count=parsed.item_count,
        result=convert(parsed.item_count, parsed.stack_size),
    )
