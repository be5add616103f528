"""
Task subsystem.

Components:
- task_models.py: the Task record and its display label
- task_store.py: SQLite-backed storage for tasks
"""
