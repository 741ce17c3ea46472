"""
Storage subsystem.

Components:
- kv_store.py: JSON-file key-value store (process-wide preferences file)
- item_store.py: TaskItem save/load over any KeyValueStore
"""
