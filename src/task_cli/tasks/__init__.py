"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus)
- task_store.py: flat-file storage (load once, save once)
- task_api.py: in-memory CRUD helpers used by the CLI commands
"""
