"""
Terminal task list backed by a local SQLite file.

Packages:
- tasks: Task record and TaskStore
- cli: entrypoint, bootstrap, main-menu actions
- connectors: interactive console shell
"""

__version__ = "0.1.0"
