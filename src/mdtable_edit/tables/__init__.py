"""Pipe-table detection and the in-memory table model.

Submodules:
  patterns   -- compiled regex patterns
  rows       -- split a table line into cells and join cells back into a line
  schema     -- Table Pydantic model, identifier derivation, line mapping
  detection  -- single-pass scan that builds the table registry
"""
