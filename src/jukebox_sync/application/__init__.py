"""
Application Layer

Contains use cases, command/query handlers, and application services.
This layer orchestrates domain objects and infrastructure to fulfill use cases.

Structure:
- commands/: Write operations applied by the room engine (AddSongCommand, VoteSongCommand, etc.)
- queries/: Read operations for the request/response boundary
- services/: Room directory, room engine and broadcast gateway
- interfaces/: Port interfaces for infrastructure adapters
"""
