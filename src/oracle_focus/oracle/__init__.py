"""
The Oracle: step generation for the focus task.

Components:
- steps.py: LLM-backed step generator (async) and its error type
- focus.py: focus zone state (current task, steps, dismissible error)
"""
