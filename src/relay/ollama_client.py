"""HTTP client for the Ollama text-generation API."""

import logging

import httpx

from src.errors import UpstreamError
from src.models.schemas import GenerationRequest, GenerationResult
from src.relay.config import RelayConfig, get_relay_config

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate"


class OllamaClient:
    """Thin async wrapper around ``POST /api/generate``.

    Opens one connection per call; nothing is shared between requests.
    """

    def __init__(
        self,
        config: RelayConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional relay configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport, used to stub the server in tests.
        """
        self._config = config or get_relay_config()
        self._transport = transport

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """Submit a prompt and wait for the complete generated text.

        Args:
            request: Model, prompt and stream flag to send.

        Returns:
            The parsed generation result.

        Raises:
            UpstreamError: If the server answers with a non-2xx status.
            httpx.HTTPError: On connection failures and timeouts.
            ValueError: If the body is not JSON or lacks ``response``.
        """
        async with httpx.AsyncClient(
            base_url=self._config.base_url,
            timeout=self._config.timeout,
            transport=self._transport,
        ) as client:
            response = await client.post(GENERATE_PATH, json=request.model_dump())

        if not response.is_success:
            raise UpstreamError(response.status_code)

        logger.debug(f"Generation finished for model {request.model}")
        return GenerationResult.model_validate(response.json())
