"""
Core layer.

Components:
- models.py: TaskItem, ListKeys
- transitions.py: pure state transitions over ListState
- transfer.py: typed payload used to move items between lists
- ports.py: storage interfaces the rest of the app depends on
- errors.py: exception hierarchy
"""
