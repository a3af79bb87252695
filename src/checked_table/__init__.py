"""Error-checked in-memory table with optional named columns.

Submodules:
  config    -- project root, .env loading, logging setup
  errors    -- TableError and its subclasses
  schema    -- Pydantic models validating raw rows and columns
  indexing  -- bounds checks and column-name resolution
  headers   -- header map construction and index rebalancing
  table     -- the Table class
"""
