# Middleware package init
"""
Item Service — Middleware Package
===================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: Assigns the correlation ID used by every later log line
    2. Logging: Logs method, path, status and duration with that ID
    3. CORS: FastAPI's CORSMiddleware (handles preflight)
"""
