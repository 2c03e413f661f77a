"""Domain-wide constants."""

from __future__ import annotations

import string


class RoomConstants:
    """Room code format and defaults."""

    CODE_LENGTH = 6
    # Codes are case-insensitive; everything is normalised to upper case.
    CODE_ALPHABET = string.ascii_uppercase + string.digits
    DEFAULT_SKIP_THRESHOLD = 0.5
    MAX_CODE_ATTEMPTS = 100


class SQLPragmas:
    """SQLite PRAGMA statements for database configuration.

    These pragmas are applied to each connection to ensure consistent behavior.
    """

    JOURNAL_MODE_WAL = "PRAGMA journal_mode=WAL"
    FOREIGN_KEYS_ON = "PRAGMA foreign_keys=ON"
    BUSY_TIMEOUT = "PRAGMA busy_timeout={timeout}"
