"""Centralized message constants for error messages, validation, and user feedback."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Room Errors
    ROOM_NOT_FOUND = "Room not found"
    SONG_NOT_FOUND = "Song not found in queue"
    MEMBER_NOT_FOUND = "User is not a member of this room"
    ONLY_HOST_CAN_SKIP = "Only host can skip"
    ROOM_CODE_EXHAUSTED = "Could not allocate a unique room code after {attempts} attempts"

    # Room Code Validation Errors
    EMPTY_ROOM_CODE = "Room code cannot be empty"
    INVALID_ROOM_CODE_LENGTH = "Room code must be exactly {length} characters"
    INVALID_ROOM_CODE_CHARS = "Room code may only contain letters and digits"

    # Request Validation Errors
    ROOM_NAME_REQUIRED = "Room name and host name are required"
    USER_NAME_REQUIRED = "User name is required"
    ROOM_CODE_REQUIRED = "Room code is required"
    SONG_AND_USER_REQUIRED = "Song and userId are required"
    VOTE_FIELDS_REQUIRED = "songId, userId and numeric vote are required"
    USER_ID_REQUIRED = "userId is required"
    SEARCH_QUERY_REQUIRED = "Search query is required"
    INVALID_PAYLOAD = "Invalid payload: {details}"

    # Settings Validation Errors
    INVALID_DATABASE_URL = "Database URL must start with sqlite://"
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"

    # Time/Date Validation Errors
    TIMEZONE_REQUIRED_UTC_DATETIME = "UtcDateTime requires a timezone-aware datetime"

    # Store Errors
    STORE_READ_FAILED = "Failed to load room {code}"
    STORE_WRITE_FAILED = "Failed to save room {code}"
    STORE_CLEANUP_FAILED = "Failed to remove stale rooms"
    STORE_COUNT_FAILED = "Failed to count rooms"

    # Boundary Errors
    TRANSPORT_NOT_INITIALIZED = "Transport not initialized. Call set_transport() first."


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters
    for proper log formatting and structured logging support.
    """

    # Database Lifecycle
    DATABASE_INITIALIZED = "Database initialized at %s"
    DATABASE_CLOSED = "Database manager closed"

    # Cleanup Operations
    CLEANUP_STARTED = "Cleanup job started"
    CLEANUP_STOPPED = "Cleanup job stopped"
    CLEANUP_ALREADY_RUNNING = "Cleanup job is already running"
    CLEANUP_CYCLE_RUNNING = "Running cleanup cycle"
    CLEANUP_COMPLETED = "Cleanup completed: %s stale rooms removed"
    CLEANUP_ROOMS_FAILED = "Failed to cleanup rooms: %r"

    # Room Lifecycle
    ROOM_CREATED = "Room %s (%s) created by host %s"
    ROOM_CODE_COLLISION = "Room code %s already in use, retrying"
    ROOM_SAVED = "Saved room %s"
    ROOM_DELETED = "Deleted room %s"
    ROOM_STALE_CLEANED = "Cleaned up %s stale rooms"

    # Membership
    MEMBER_JOINED = "User %s (%s) joined room %s"
    MEMBER_LEFT = "User %s left room %s"
    HOST_REASSIGNED = "Host of room %s reassigned from %s to %s"

    # Queue / Voting
    SONG_ADDED = "Song %r added to room %s by %s"
    SONG_VOTED = "Vote %d by %s on song %s in room %s (count now %d)"
    TRACK_PROMOTED = "Now playing %r in room %s"
    QUEUE_EXHAUSTED = "Queue exhausted in room %s"
    SKIP_VOTE_RECORDED = "Skip vote by %s in room %s (%d/%d)"
    HOST_SKIP = "Host %s skipped track in room %s"

    # Commands
    COMMAND_REJECTED = "Command %s rejected for room %s: %s"
    COMMAND_STORE_FAILED = "Command %s failed to persist room %s: %s"
    REQUEST_FAILED = "Request %s %s failed: %s"

    # Gateway
    SESSION_JOINED = "Session %s joined room %s as %s"
    SESSION_CONNECTED = "Session %s connected"
    SESSION_DISCONNECTED = "Session %s disconnected"
    SESSION_LEAVE_FAILED = "Leave for session %s in room %s failed: %s"
    DELIVERY_FAILED = "Failed to deliver %s to session %s: %r"
    BROADCAST = "Broadcasting %d events to %d sessions in room %s"

    # Catalog
    CATALOG_LOADED = "Loaded %d songs from %s"
    CATALOG_MISSING = "Song catalog %s not found; search will return no results"

    # Server Lifecycle
    SERVER_STARTING = "Starting JukeboxSync ({environment}) on {host}:{port}"
    SERVER_STOPPED = "JukeboxSync stopped"
    SERVER_KEYBOARD_INTERRUPT = "Received keyboard interrupt, shutting down"
    SERVER_FATAL_ERROR = "Fatal error: %s"
    LOGGING_CONFIG_FALLBACK = "Could not load %s, falling back to basic config"
