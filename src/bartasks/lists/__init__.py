"""
List subsystem.

Components:
- list_manager.py: TaskListManager (one per list, persists after each mutation)
"""
