"""Locate pipe tables in a plain-text document and edit them with line-local edits.

Subpackages:
  tables   -- row splitting, table model, and table detection
  editing  -- line edits, host surfaces, and the editing session
"""
