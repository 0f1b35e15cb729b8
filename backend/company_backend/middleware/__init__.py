# Middleware package init
"""
Company Backend — Middleware Package
=====================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    - Request ID: correlation ID stored in a ContextVar and echoed in the
      X-Request-ID response header
    - Logging: method, path, status and duration for every request
    - CORS: FastAPI's CORSMiddleware, any origin/method/header by default
"""
