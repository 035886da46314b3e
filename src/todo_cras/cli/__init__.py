"""
Command line interface.

- main.py: argument dispatch and exit codes
- prompts.py: rich-based interactive prompts
- session.py: the interactive edit loop
"""
