"""Chat relay service forwarding conversations to the inference server.

Only the most recent user message is sent upstream, as a single
non-streaming prompt. Earlier messages and attached file references are
accepted but not forwarded.
"""

import logging
from collections.abc import Sequence

from src.errors import (
    GENERIC_CHAT_ERROR,
    InvalidInputError,
    ProcessingError,
    UpstreamError,
)
from src.models.schemas import ChatRequest, GenerationRequest, Message
from src.relay.config import RelayConfig, get_relay_config
from src.relay.ollama_client import OllamaClient

logger = logging.getLogger(__name__)


def extract_prompt(messages: Sequence[Message]) -> str:
    """Return the content of the last user message.

    Args:
        messages: Conversation in order, oldest first.

    Returns:
        The prompt to submit.

    Raises:
        InvalidInputError: If no message has the user role.
    """
    for message in reversed(messages):
        if message.role == "user":
            return message.content
    raise InvalidInputError("No user message found")


class ChatRelay:
    """Relays a chat request to Ollama and returns the generated text."""

    def __init__(
        self,
        config: RelayConfig | None = None,
        client: OllamaClient | None = None,
    ) -> None:
        """Initialize the relay.

        Args:
            config: Optional relay configuration.
                    Loads from environment if not provided.
            client: Optional prebuilt Ollama client.
        """
        self._config = config or get_relay_config()
        self._client = client or OllamaClient(self._config)

    async def relay(self, request: ChatRequest) -> str:
        """Generate a reply to the latest user message.

        Args:
            request: Conversation, optional model and file references.

        Returns:
            The generated text.

        Raises:
            InvalidInputError: If the conversation has no user message.
            UpstreamError: If the inference server rejects the request.
            ProcessingError: On any other failure.
        """
        prompt = extract_prompt(request.messages)
        model = request.model or self._config.default_model

        if request.files:
            logger.debug(f"Ignoring {len(request.files)} attached file reference(s)")

        try:
            result = await self._client.generate(
                GenerationRequest(model=model, prompt=prompt, stream=False)
            )
        except UpstreamError as e:
            logger.error(f"Error calling Ollama API: {e}")
            raise
        except Exception as e:
            logger.exception(f"Error calling Ollama API: {e}")
            raise ProcessingError(GENERIC_CHAT_ERROR) from e

        return result.response


# Module-level singleton instance
_chat_relay: ChatRelay | None = None


def get_chat_relay() -> ChatRelay:
    """Get or create the global chat relay.

    Returns:
        The ChatRelay instance.
    """
    global _chat_relay
    if _chat_relay is None:
        _chat_relay = ChatRelay()
    return _chat_relay
