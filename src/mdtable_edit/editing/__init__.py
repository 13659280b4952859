"""Line-local table editing.

Submodules:
  edits    -- line edit models and the EditOutcome / EditResult types
  surface  -- document source and editing surface hosts (in-memory, file)
  session  -- TableSession: registry, cell reads, and the five mutations
"""
