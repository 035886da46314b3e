"""
todo_cras: a category-based todo list kept in a plain text file.

Packages:
- store: data model, text codec and file access
- core: display selection/rendering and edit operations
- cli: entry point, interactive prompts and the edit session
"""

__version__ = "0.3.0"
