"""
Query builder - filtered, ordered, paginated fetches against one entity collection.

Input is assumed to be validated by the route schemas already; the builder
only refuses sort keys outside its allow-list, since those would be a
programming error rather than bad client input.
"""
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

from sqlalchemy import Enum, String, cast, func, or_, select
from sqlalchemy.orm import Session

from backend.app.core.dependencies import Tenant


@dataclass
class Page:
    rows: list = field(default_factory=list)
    total: int = 0


def contains_ci(column, term: str):
    """Case-insensitive literal substring match; LIKE wildcards in term are escaped."""
    if isinstance(column.type, Enum):
        column = cast(column, String)
    return column.icontains(term, autoescape=True)


class QueryBuilder:
    """
    Builds one SELECT for `model`:

        page = (
            QueryBuilder(Project, tenant=tenant, sort_fields=PROJECT_SORT_FIELDS)
            .where_equal(status="Completed", is_featured=None)
            .sort("priority", "DESC")
            .page(db, limit=20, offset=0)
        )

    Soft-deleted rows are always excluded. When a tenant is given and the
    model has an owner column, rows are scoped to that owner. Primary key
    ascending is appended to every ordering as the final tie-break.
    """

    def __init__(
        self,
        model,
        tenant: Tenant | None = None,
        sort_fields: Sequence[str] = (),
        options: Iterable[Any] = (),
    ):
        self.model = model
        self.sort_fields = tuple(sort_fields)
        self._options = list(options)
        self._filters = [model.not_deleted()]
        self._order_by: list = []
        if tenant is not None and hasattr(model, "profile_id"):
            self._filters.append(model.profile_id == tenant.profile_id)

    # --- Filters ---
    def where(self, *clauses) -> "QueryBuilder":
        self._filters.extend(clauses)
        return self

    def where_equal(self, **values) -> "QueryBuilder":
        """Exact-match filters; None means 'not filtered'."""
        for name, value in values.items():
            if value is not None:
                self._filters.append(getattr(self.model, name) == value)
        return self

    def where_any_contains(self, columns: Sequence, term: str) -> "QueryBuilder":
        """Row matches when term is a case-insensitive substring of ANY column."""
        self._filters.append(or_(*(contains_ci(col, term) for col in columns)))
        return self

    # --- Ordering ---
    def sort(self, field_name: str, order: str = "DESC") -> "QueryBuilder":
        if field_name not in self.sort_fields:
            raise ValueError(f"Unsortable field for {self.model.__name__}: {field_name!r}")
        column = getattr(self.model, field_name)
        self._order_by.append(column.asc() if order.upper() == "ASC" else column.desc())
        return self

    def order_by(self, *clauses) -> "QueryBuilder":
        """Fixed server-side ordering (not client controlled)."""
        self._order_by.extend(clauses)
        return self

    # --- Execution ---
    def statement(self):
        stmt = select(self.model).where(*self._filters)
        if self._options:
            stmt = stmt.options(*self._options)
        return stmt.order_by(*self._order_by, self.model.id.asc())

    def count(self, db: Session) -> int:
        stmt = select(func.count()).select_from(self.model).where(*self._filters)
        return db.execute(stmt).scalar_one()

    def all(self, db: Session, limit: int | None = None, offset: int = 0) -> list:
        stmt = self.statement()
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset:
            stmt = stmt.offset(offset)
        return list(db.execute(stmt).scalars().unique().all())

    def page(self, db: Session, limit: int, offset: int = 0) -> Page:
        """Rows for one page plus the total before pagination."""
        return Page(rows=self.all(db, limit=limit, offset=offset), total=self.count(db))
