from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from ...schemas.chat import ChatQueryIn, ChatOut, ChatErrorOut
from ...services.chat_service import ChatError, handle_query
from ...services.family_repository import FamilyRepository
from ...models.user import User
from ..deps import get_repository, get_current_user

router = APIRouter()

@router.post(
    "/chat",
    response_model=ChatOut,
    responses={400: {"model": ChatErrorOut}, 500: {"model": ChatErrorOut}},
)
def chat(payload: ChatQueryIn | None = Body(default=None), repo: FamilyRepository = Depends(get_repository), current: User = Depends(get_current_user)):
    try:
        text = handle_query(repo, payload.query if payload else None, current.id)
    except ChatError as e:
        return JSONResponse(status_code=e.status_code, content={"error": e.message})
    return ChatOut(response=text)
