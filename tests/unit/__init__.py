"""Unit tests for individual components in isolation.

Coverage:
    - relay/: Prompt extraction, Ollama client, error mapping
    - storage/: Upload naming, writing and rollback
    - models/ and config: Pydantic validation and environment loading
"""
