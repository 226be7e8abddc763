# Services package init
"""
FileStore Backend — Services Layer
====================================

Service Inventory:
    - StorageBackend (abstract): exists / list / get / put / delete
    - LocalStorage: StorageBackend over a directory on disk
    - InMemoryStorage: StorageBackend over a dict
    - FileStorageHandler: Validation and status selection for the file routes
"""
