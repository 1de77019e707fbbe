from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Hello"])


@router.get(
    "/hello",
    response_class=PlainTextResponse,
    summary="Fixed greeting",
)
async def hello() -> str:
    return "Hello World!"
