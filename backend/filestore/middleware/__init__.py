# Middleware package init
"""
FileStore Backend — Middleware Package
========================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: Assign the correlation ID used by every log line
    2. Logging: Log method, path, status and duration with that ID
"""
