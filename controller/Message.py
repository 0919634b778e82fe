from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(prefix="", tags=["Messages"])


@router.get("/send", response_class=PlainTextResponse)
def send_message():
    return "Send message endpoint"
