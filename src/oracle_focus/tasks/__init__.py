"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, TaskStatus)
- task_store.py: in-memory store, inbox/focus views, change notification
- folders.py: folder buckets with their own simple to-dos
"""
