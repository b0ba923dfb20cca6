"""TeamSync: workspaces, members, projects and tasks."""

__version__ = "0.1.0"
