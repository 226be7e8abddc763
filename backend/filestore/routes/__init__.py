# Routes package init
"""
FileStore Backend — API Routes Package
========================================

Route Inventory:
    - files.py:   GET/POST /files, GET/PUT/PATCH/DELETE /files/{filename}
    - health.py:  GET /health

Routes stay thin: pull dependencies, call the handler, return its result.
"""
