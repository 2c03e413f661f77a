"""SQLite persistence: database manager, repositories and retention job."""
