"""
BirdAPI: Middleware Package
============================

Middleware Chain:
    Request → [Access: request ID + access log] → Route Handler

    The request ID is set before the handler runs, so exception handlers
    can include it in error bodies. The access line is written after the
    response is built, so it carries the final status code.
"""
