"""
Fashion Catalog API — Middleware Package
=========================================

Middleware Chain (outermost first):
    Request → [CORS] → [Request ID] → [Logging] → [GZip] → [Basic Auth] → Route Handler

    - CORS answers preflight requests before authentication runs
    - Request ID is set before anything logs
    - Logging records every response, 401 rejections included
    - Basic Auth rejects unauthenticated requests before routing
"""
