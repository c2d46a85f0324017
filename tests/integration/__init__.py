"""Integration tests for the HTTP endpoints working as a system.

Requests go through the full FastAPI stack (routing, validation, error
rendering, CORS). Only the inference server is faked.
"""
