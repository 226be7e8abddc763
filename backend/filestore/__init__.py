"""
FileStore Backend — Application Package
=========================================

What: Flat-file CRUD API over a single storage directory.
Who:  Imported by uvicorn (`uvicorn filestore.main:app`), pytest and the
      route/service modules (`from filestore.config import settings`).

Layers:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     FileStorageHandler (Service)    │  ← Validation, status selection
    ├─────────────────────────────────────┤
    │      StorageBackend (Primitives)    │  ← exists / list / get / put / delete
    └─────────────────────────────────────┘

Each layer only talks to the one below it; the storage backend is injected
into the handler, never reached through a global.
"""

__version__ = "1.0.0"
