"""Infrastructure layer - external systems integration.

This layer contains implementations for:
- Persistence (aiosqlite database, room repository, retention job)
- Catalog (JSON-file song search)
- Web (FastAPI routes and Socket.IO handlers)
"""
