"""Chat relay to a local Ollama inference server.

Responsibilities:
    - Picking the prompt (latest user message) out of a conversation
    - Blocking request/response calls to ``/api/generate``
    - Mapping upstream and transport failures onto service errors

Maintains clean separation from the HTTP layer.
"""

from src.relay.chat_relay import ChatRelay, extract_prompt, get_chat_relay
from src.relay.config import RelayConfig, get_relay_config
from src.relay.ollama_client import OllamaClient

__all__ = [
    "ChatRelay",
    "OllamaClient",
    "RelayConfig",
    "extract_prompt",
    "get_chat_relay",
    "get_relay_config",
]
