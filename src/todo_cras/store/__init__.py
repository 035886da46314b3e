"""
Store subsystem.

Components:
- models.py: data structures (Category, Task, TodoList, Color) and value parsing
- codec.py: text format parser/serializer
- todo_file.py: whole-file load/save of a store path
"""
