"""Services used by commands: git client and manifest patcher."""
