from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from assetlens.database.connection import get_connection
from assetlens.database.models import HistoryEntry
from assetlens.records.models import AssetRecord


class HistoryRepository:
    """Database operations for the extraction_history table."""

    def insert(self, user_id: str, filename: str, records: list[AssetRecord]) -> str:
        """Store one extraction result and return the new row id."""
        payload = [r.to_mapping() for r in records]
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO extraction_history (user_id, filename, extracted_json)
                    VALUES (%s, %s, %s)
                    RETURNING id
                    """,
                    (user_id, filename, Jsonb(payload)),
                )
                row = cur.fetchone()
            conn.commit()
        if row is None:
            raise RuntimeError("INSERT into extraction_history returned no id")
        return str(row[0])

    def list_for_user(self, user_id: str) -> list[HistoryEntry]:
        """Newest first."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, user_id, filename, extracted_json, created_at
                    FROM extraction_history
                    WHERE user_id = %s
                    ORDER BY created_at DESC
                    """,
                    (user_id,),
                )
                rows = cur.fetchall()

        return [
            HistoryEntry(
                id=str(row["id"]),
                user_id=row["user_id"],
                filename=row["filename"],
                records=[
                    AssetRecord.from_mapping(item)
                    for item in (row["extracted_json"] or [])
                    if isinstance(item, dict)
                ],
                created_at=row["created_at"],
            )
            for row in rows
        ]

    def delete(self, history_id: str) -> bool:
        """Delete one history entry. Returns False when no row matched."""
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    "DELETE FROM extraction_history WHERE id = %s",
                    (history_id,),
                )
                deleted = cur.rowcount > 0
            conn.commit()
        return deleted
