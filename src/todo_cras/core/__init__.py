"""
Core logic, independent of the terminal.

- ports.py: Protocols for the prompt collaborator and injectable randomness/clock
- display.py: deadline ordering, probability filter, line rendering
- editing.py: add/edit/delete operations over a TodoList
"""
