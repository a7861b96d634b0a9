# Middleware package init
"""
ArticleHub Backend — Middleware Package
========================================

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: generate or accept the correlation ID
    2. Logging: one access line with status and duration, tagged with the ID
    3. CORS: FastAPI's CORSMiddleware (preflight handling)

Responses travel the chain in reverse, which is how the logging middleware
sees the final status code and the request ID lands in the response headers.
"""
