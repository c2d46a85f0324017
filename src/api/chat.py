"""Chat endpoint relaying the latest user message to Ollama."""

import logging

from fastapi import APIRouter, Depends

from src.models.schemas import ChatRequest, ChatResponse, ErrorResponse
from src.relay.chat_relay import ChatRelay, get_chat_relay

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(
    request: ChatRequest,
    relay: ChatRelay = Depends(get_chat_relay),
) -> ChatResponse:
    """Generate a reply to the conversation's latest user message.

    Args:
        request: Conversation history, optional model and file references.

    Returns:
        ChatResponse with the generated text.

    Raises:
        400: No user message in the conversation.
        422: Malformed request body.
        500: Inference server failure or unexpected error.
    """
    logger.info(f"Chat request with {len(request.messages)} message(s)")
    response = await relay.relay(request)
    return ChatResponse(response=response)
