"""FastAPI endpoints for the Ollama chat relay.

Endpoints:
    - GET /health: Service health status
    - POST /api/chat: Relay the latest user message to Ollama
    - POST /api/upload: Store uploaded files on local disk

Service errors are rendered as ``{"error": message}``.
"""
