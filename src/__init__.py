"""Ollama Chat Relay - minimal chat and file upload backend for a local LLM.

Combines FastAPI for HTTP handling, httpx for calls to the Ollama server,
and Pydantic for data validation.

Components:
    - api: HTTP endpoints and error rendering
    - relay: Forwarding chat prompts to Ollama
    - storage: Writing uploaded files to local disk
    - models: Request/response schemas
"""

__version__ = "0.1.0"
