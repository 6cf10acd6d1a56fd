"""Integration tests for the HTTP API.

Runs real requests through FastAPI routing, validation and the
conversation controllers. Only the model session is replaced.
"""
