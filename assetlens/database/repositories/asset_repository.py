from psycopg import sql
from psycopg.rows import dict_row

from assetlens.database.connection import get_connection
from assetlens.records.models import COLUMNS, AssetRecord

_ATTRS: list[str] = [attr for attr, _ in COLUMNS]


class AssetRepository:
    """Database operations for the assets table. Asset tag is the unique key."""

    def upsert_many(self, user_id: str, records: list[AssetRecord]) -> int:
        """Insert or update records keyed on asset_tag. Returns the number written."""
        if not records:
            return 0
        columns = [*_ATTRS, "user_id"]
        query = sql.SQL(
            """
            INSERT INTO assets ({columns}, updated_at)
            VALUES ({placeholders}, NOW())
            ON CONFLICT (asset_tag) DO UPDATE
            SET {updates}, updated_at = NOW()
            """
        ).format(
            columns=sql.SQL(", ").join(map(sql.Identifier, columns)),
            placeholders=sql.SQL(", ").join(sql.Placeholder() * len(columns)),
            updates=sql.SQL(", ").join(
                sql.SQL("{col} = EXCLUDED.{col}").format(col=sql.Identifier(col))
                for col in columns
                if col != "asset_tag"
            ),
        )
        params = [
            (*(getattr(record, attr) for attr in _ATTRS), user_id) for record in records
        ]
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.executemany(query, params)
            conn.commit()
        return len(records)

    def list_all(self) -> list[AssetRecord]:
        """Most recently updated first."""
        query = sql.SQL("SELECT {columns} FROM assets ORDER BY updated_at DESC").format(
            columns=sql.SQL(", ").join(map(sql.Identifier, _ATTRS)),
        )
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(query)
                rows = cur.fetchall()
        return [AssetRecord(**{attr: row[attr] for attr in _ATTRS}) for row in rows]

    def delete(self, asset_tag: str) -> bool:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute("DELETE FROM assets WHERE asset_tag = %s", (asset_tag,))
                deleted = cur.rowcount > 0
            conn.commit()
        return deleted
