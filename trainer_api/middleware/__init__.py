# Middleware package init
"""
Trainer API — Middleware Package
==================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID first, so the access log line carries it
    - CORS innermost, answering preflight OPTIONS requests
"""
