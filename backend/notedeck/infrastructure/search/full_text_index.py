"""
Full-text index over the ``name`` column of a content set table.

SQLite uses an FTS5 external-content table kept in sync by triggers and
ranked with bm25. PostgreSQL uses a GIN expression index over
``to_tsvector('english', name)`` ranked with ts_rank. Both stem English
words (Porter) and support exact phrase matching.

Ranking:
    Hits are ordered by score descending, then row id ascending. The id
    tie-break is a local policy; neither engine orders equal scores.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import structlog
from sqlalchemy import Row, column, func, select, table, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from notedeck.application.common.exceptions import IndexBuildError
from notedeck.domain.common.value_objects import SearchQuery
from notedeck.infrastructure.search.single_flight import SingleFlight

logger = structlog.get_logger(__name__)

_IDENTIFIER = re.compile(r"^[a-z_][a-z0-9_]*$")
_TS_CONFIG = "english"


@dataclass(frozen=True)
class IndexHit:
    id: int
    score: float


def _is_postgresql(db: Session) -> bool:
    return db.get_bind().dialect.name == "postgresql"


def _fts5_quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def compile_fts5_query(query: SearchQuery) -> str:
    """
    Compile a parsed query into an FTS5 MATCH expression.

    Phrases are ANDed and, when present, take over from loose terms; loose
    terms alone are ORed. Every token is quoted so FTS5 never sees operator
    syntax from user input.
    """
    if query.phrases:
        expression = " AND ".join(_fts5_quote(phrase) for phrase in query.phrases)
    else:
        expression = " OR ".join(_fts5_quote(term) for term in query.terms)

    if len(query.phrases) + len(query.terms) > 1 and query.excluded:
        expression = f"({expression})"
    for excluded in query.excluded:
        expression += f" NOT {_fts5_quote(excluded)}"
    return expression


class FullTextIndex:
    """
    Lazily built index for one table.

    One instance per table per engine; ``ensure_ready`` builds the index
    structures once and is safe to call from concurrent requests.
    """

    def __init__(self, table_name: str) -> None:
        if not _IDENTIFIER.match(table_name):
            raise ValueError(f"Invalid table name for full-text index: {table_name!r}")
        self.table_name = table_name
        self.fts_table = f"{table_name}_fts"
        self._build_once = SingleFlight(f"full_text_index:{table_name}")

    @property
    def is_ready(self) -> bool:
        return self._build_once.is_done

    def ensure_ready(self, db: Session) -> None:
        """
        Build the index on first use.

        Raises:
            IndexBuildError: If the build failed; the next call retries
        """
        self._build_once.run(lambda: self._build(db))

    def reset(self) -> None:
        """Mark the index as unbuilt, e.g. after the database was recreated."""
        self._build_once.reset()

    def _build(self, db: Session) -> None:
        logger.info("full_text_index_build_started", table=self.table_name)
        try:
            if _is_postgresql(db):
                self._build_postgresql(db)
            else:
                self._build_sqlite(db)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("full_text_index_build_failed", table=self.table_name, error=str(e))
            raise IndexBuildError(
                f"Full-text index for '{self.table_name}' could not be built: {e}"
            ) from e
        logger.info("full_text_index_build_completed", table=self.table_name)

    def _build_sqlite(self, db: Session) -> None:
        t, fts = self.table_name, self.fts_table
        statements = [
            f"""
            CREATE VIRTUAL TABLE IF NOT EXISTS {fts} USING fts5(
                name,
                content='{t}', content_rowid='id',
                tokenize='porter unicode61 remove_diacritics 2'
            )
            """,
            f"""
            CREATE TRIGGER IF NOT EXISTS {t}_fts_ai AFTER INSERT ON {t} BEGIN
                INSERT INTO {fts}(rowid, name) VALUES (new.id, new.name);
            END
            """,
            f"""
            CREATE TRIGGER IF NOT EXISTS {t}_fts_ad AFTER DELETE ON {t} BEGIN
                INSERT INTO {fts}({fts}, rowid, name) VALUES ('delete', old.id, old.name);
            END
            """,
            f"""
            CREATE TRIGGER IF NOT EXISTS {t}_fts_au AFTER UPDATE OF name ON {t} BEGIN
                INSERT INTO {fts}({fts}, rowid, name) VALUES ('delete', old.id, old.name);
                INSERT INTO {fts}(rowid, name) VALUES (new.id, new.name);
            END
            """,
            # Index rows committed before the triggers existed
            f"INSERT INTO {fts}({fts}) VALUES ('rebuild')",
        ]
        for statement in statements:
            db.execute(text(statement))

    def _build_postgresql(self, db: Session) -> None:
        db.execute(
            text(
                f"CREATE INDEX IF NOT EXISTS ix_{self.table_name}_name_fts "
                f"ON {self.table_name} USING GIN (to_tsvector('{_TS_CONFIG}', name))"
            )
        )

    def match(self, db: Session, query: SearchQuery) -> list[IndexHit]:
        """
        Return ids of rows whose name matches ``query``, best match first.

        Must be called after ``ensure_ready``.
        """
        if query.is_empty:
            return []

        if _is_postgresql(db):
            rows = self._match_postgresql(db, query)
        else:
            rows = db.execute(
                text(
                    f"SELECT rowid AS id, -bm25({self.fts_table}) AS score "
                    f"FROM {self.fts_table} WHERE {self.fts_table} MATCH :expression "
                    "ORDER BY score DESC, id ASC"
                ),
                {"expression": compile_fts5_query(query)},
            ).all()

        return [IndexHit(id=row.id, score=max(float(row.score), 0.0)) for row in rows]

    def _match_postgresql(self, db: Session, query: SearchQuery) -> Sequence[Row[Any]]:
        if query.phrases:
            tsquery = func.phraseto_tsquery(_TS_CONFIG, query.phrases[0])
            for phrase in query.phrases[1:]:
                tsquery = tsquery.op("&&")(func.phraseto_tsquery(_TS_CONFIG, phrase))
        else:
            tsquery = func.plainto_tsquery(_TS_CONFIG, query.terms[0])
            for term in query.terms[1:]:
                tsquery = tsquery.op("||")(func.plainto_tsquery(_TS_CONFIG, term))

        for excluded in query.excluded:
            excluded_query = func.phraseto_tsquery(_TS_CONFIG, excluded)
            tsquery = tsquery.op("&&")(func.tsquery_not(excluded_query))

        content = table(self.table_name, column("id"), column("name"))
        document = func.to_tsvector(_TS_CONFIG, content.c.name)
        score = func.ts_rank(document, tsquery).label("score")
        stmt = (
            select(content.c.id, score)
            .where(document.op("@@")(tsquery))
            .order_by(score.desc(), content.c.id.asc())
        )
        return db.execute(stmt).all()
