"""SQLite implementation of the room repository."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any

import aiosqlite

from jukebox_sync.domain.room.entities import Member, Room, RoomSettings, Track
from jukebox_sync.domain.room.repository import RoomRepository
from jukebox_sync.domain.shared.datetime_utils import UtcDateTime
from jukebox_sync.domain.shared.exceptions import StoreError
from jukebox_sync.domain.shared.messages import ErrorMessages, LogTemplates

if TYPE_CHECKING:
    from ..database import Database

logger = logging.getLogger(__name__)

_INSERT_TRACK = """
    INSERT INTO room_tracks (
        room_code, song_id, title, artist, duration, added_by,
        votes_json, position, is_current
    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
"""


class SQLiteRoomRepository(RoomRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    async def get(self, code: str) -> Room | None:
        try:
            room_row = await self._db.fetch_one("SELECT * FROM rooms WHERE code = ?", (code,))
            if room_row is None:
                return None

            member_rows = await self._db.fetch_all(
                "SELECT * FROM room_members WHERE room_code = ? ORDER BY position ASC",
                (code,),
            )
            track_rows = await self._db.fetch_all(
                "SELECT * FROM room_tracks WHERE room_code = ? ORDER BY position ASC",
                (code,),
            )
        except aiosqlite.Error as e:
            raise StoreError(ErrorMessages.STORE_READ_FAILED.format(code=code), code) from e

        queue: list[Track] = []
        current_track: Track | None = None
        for row in track_rows:
            track = self._row_to_track(row)
            if row["is_current"]:
                current_track = track
            else:
                queue.append(track)

        started_at = room_row["current_track_started_at"]
        return Room(
            code=room_row["code"],
            name=room_row["name"],
            host=room_row["host"],
            users=[self._row_to_member(row) for row in member_rows],
            queue=queue,
            current_track=current_track,
            current_track_started_at=UtcDateTime.from_iso(started_at).dt if started_at else None,
            skip_votes=set(json.loads(room_row["skip_votes_json"])),
            settings=RoomSettings(skip_threshold=room_row["skip_threshold"]),
            created_at=UtcDateTime.from_iso(room_row["created_at"]).dt,
            updated_at=UtcDateTime.from_iso(room_row["updated_at"]).dt,
        )

    async def save(self, room: Room) -> None:
        code = str(room.code)
        try:
            async with self._db.transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO rooms (
                        code, name, host, skip_threshold, skip_votes_json,
                        current_track_started_at, created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    ON CONFLICT(code) DO UPDATE SET
                        name = excluded.name,
                        host = excluded.host,
                        skip_threshold = excluded.skip_threshold,
                        skip_votes_json = excluded.skip_votes_json,
                        current_track_started_at = excluded.current_track_started_at,
                        updated_at = excluded.updated_at
                    """,
                    (
                        code,
                        room.name,
                        room.host,
                        room.settings.skip_threshold,
                        json.dumps(sorted(room.skip_votes)),
                        UtcDateTime(room.current_track_started_at).iso
                        if room.current_track_started_at
                        else None,
                        UtcDateTime(room.created_at).iso,
                        UtcDateTime(room.updated_at).iso,
                    ),
                )

                await conn.execute("DELETE FROM room_members WHERE room_code = ?", (code,))
                await conn.executemany(
                    """
                    INSERT INTO room_members (room_code, user_id, name, joined_at, position)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    [
                        (code, member.id, member.name, UtcDateTime(member.joined_at).iso, position)
                        for position, member in enumerate(room.users)
                    ],
                )

                await conn.execute("DELETE FROM room_tracks WHERE room_code = ?", (code,))
                if room.current_track:
                    await conn.execute(
                        _INSERT_TRACK, self._track_to_params(room.current_track, code, -1, True)
                    )
                await conn.executemany(
                    _INSERT_TRACK,
                    [
                        self._track_to_params(track, code, position, False)
                        for position, track in enumerate(room.queue)
                    ],
                )
        except aiosqlite.Error as e:
            raise StoreError(ErrorMessages.STORE_WRITE_FAILED.format(code=code), code) from e

        logger.debug(LogTemplates.ROOM_SAVED, code)

    async def exists(self, code: str) -> bool:
        try:
            row = await self._db.fetch_one("SELECT 1 FROM rooms WHERE code = ?", (code,))
        except aiosqlite.Error as e:
            raise StoreError(ErrorMessages.STORE_READ_FAILED.format(code=code), code) from e
        return row is not None

    async def delete(self, code: str) -> bool:
        try:
            async with self._db.transaction() as conn:
                cursor = await conn.execute("DELETE FROM rooms WHERE code = ?", (code,))
                deleted = cursor.rowcount > 0
        except aiosqlite.Error as e:
            raise StoreError(ErrorMessages.STORE_WRITE_FAILED.format(code=code), code) from e

        if deleted:
            logger.debug(LogTemplates.ROOM_DELETED, code)
        return deleted

    async def cleanup_stale(self, older_than: datetime) -> int:
        cutoff = UtcDateTime(older_than).iso
        try:
            async with self._db.transaction() as conn:
                cursor = await conn.execute("DELETE FROM rooms WHERE updated_at < ?", (cutoff,))
                count = cursor.rowcount
        except aiosqlite.Error as e:
            raise StoreError(ErrorMessages.STORE_CLEANUP_FAILED) from e

        if count > 0:
            logger.info(LogTemplates.ROOM_STALE_CLEANED, count)
        return count

    async def count(self) -> int:
        try:
            row = await self._db.fetch_one("SELECT COUNT(*) as count FROM rooms")
        except aiosqlite.Error as e:
            raise StoreError(ErrorMessages.STORE_COUNT_FAILED) from e
        return row["count"] if row else 0

    @staticmethod
    def _row_to_member(row: dict[str, Any]) -> Member:
        return Member(
            id=row["user_id"],
            name=row["name"],
            joined_at=UtcDateTime.from_iso(row["joined_at"]).dt,
        )

    @staticmethod
    def _row_to_track(row: dict[str, Any]) -> Track:
        return Track(
            id=row["song_id"],
            title=row["title"],
            artist=row["artist"],
            duration=row["duration"],
            added_by=row["added_by"],
            votes=json.loads(row["votes_json"]),
        )

    @staticmethod
    def _track_to_params(
        track: Track, code: str, position: int, is_current: bool
    ) -> tuple[Any, ...]:
        return (
            code,
            track.id,
            track.title,
            track.artist,
            track.duration,
            track.added_by,
            json.dumps(track.votes),
            position,
            1 if is_current else 0,
        )
