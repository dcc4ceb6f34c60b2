"""Domain model and merge logic, independent of any document or schema library."""
