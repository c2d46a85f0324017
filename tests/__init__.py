"""Test package for Ollama Chat Relay.

Structure:
    - unit/: Relay, ingestor, config and schema tests in isolation
    - integration/: HTTP endpoint tests against the real FastAPI app

The Ollama server is stubbed with httpx.MockTransport; uploads go to tmp_path.
Leverages pytest with pytest-check for soft assertions.
"""
