# Middleware package init
"""
Tutor API — Middleware Package
===============================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: Generate correlation ID for logging and error payloads
    2. Logging: Log request details with the generated request ID
    3. GZip / CORS: Starlette built-ins

    The order is reversed for responses, so the access log sees the final
    status code and the request ID header is set last.
"""
