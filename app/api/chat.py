"""
Chat API endpoints.

Script intake conversation for the caller's current session.
"""

from fastapi import APIRouter, HTTPException, Response, status

from app.api.deps import ChatActor, Conversation
from app.core.exceptions import InfrastructureError, LLMError
from app.models.chat import ChatSendRequest, ChatSendResponse
from app.models.chat_session import ChatMessage

router = APIRouter()


@router.post("/messages", response_model=ChatSendResponse)
async def send_message(
    request: ChatSendRequest,
    actor: ChatActor,
    service: Conversation,
):
    """Send one message and get the assistant's reply."""
    try:
        result = await service.send(actor.session_id, actor.id, request.message)
    except LLMError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="The assistant is unavailable right now. Please try again.",
        ) from e
    except InfrastructureError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to save the conversation. Please try again.",
        ) from e

    return ChatSendResponse(message=result.message, finalized=result.finalized)


@router.get("/messages", response_model=list[ChatMessage])
async def fetch_messages(
    actor: ChatActor,
    service: Conversation,
):
    """Active history of the caller's session, oldest first."""
    try:
        return await service.fetch_messages(actor.session_id)
    except InfrastructureError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to load the conversation.",
        ) from e


@router.delete("/messages", status_code=status.HTTP_204_NO_CONTENT)
async def delete_messages(
    actor: ChatActor,
    service: Conversation,
):
    """Start a new conversation in the same session."""
    try:
        await service.reset(actor.session_id)
    except InfrastructureError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to reset the conversation.",
        ) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
