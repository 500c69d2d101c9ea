import threading
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from fastapi import HTTPException, status
from pydantic import BaseModel

from eclat.schemas import can_transition

SchemaType = TypeVar("SchemaType", bound=BaseModel)

Guard = Callable[[Any], None]


def resolve(obj: Any, path: str) -> Any:
    """Follow a dotted attribute path, e.g. "details.date"."""
    for part in path.split("."):
        if obj is None:
            return None
        obj = getattr(obj, part, None)
    return obj


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _matches(obj: Any, filters: Optional[Dict[str, Any]]) -> bool:
    if not filters:
        return True
    for key, value in filters.items():
        if value is None:
            continue
        if _plain(resolve(obj, key)) != _plain(value):
            return False
    return True


class Repository(Generic[SchemaType]):
    """
    Storage seam used by every handler. Records are pydantic schemas; a backend
    only decides where they live.
    """

    label = "Record"

    def get(self, id) -> Optional[SchemaType]:
        raise NotImplementedError

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[SchemaType]:
        raise NotImplementedError

    def add(self, obj: SchemaType) -> SchemaType:
        raise NotImplementedError

    def update(self, id, changes: Dict[str, Any], guard: Optional[Guard] = None) -> Optional[SchemaType]:
        """Apply field changes atomically. guard(current) may raise to veto."""
        raise NotImplementedError

    def remove(self, id) -> Optional[SchemaType]:
        raise NotImplementedError

    def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        return len(self.list(filters))

    # ---------------- GET OR 404 ----------------
    def get_or_404(self, id) -> SchemaType:
        obj = self.get(id)
        if obj is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"{self.label} not found",
            )
        return obj


class InMemoryRepository(Repository[SchemaType]):
    """Insertion-ordered list guarded by a single lock."""

    def __init__(self, schema: Type[SchemaType], id_field: str = "id", label: Optional[str] = None):
        self.schema = schema
        self.id_field = id_field
        self.label = label or schema.__name__
        self._items: List[SchemaType] = []
        self._lock = threading.Lock()

    def _index(self, id) -> int:
        for i, item in enumerate(self._items):
            if getattr(item, self.id_field) == id:
                return i
        return -1

    # ---------------- GET ----------------
    def get(self, id) -> Optional[SchemaType]:
        with self._lock:
            i = self._index(id)
            return self._items[i] if i != -1 else None

    # ---------------- GET ALL ----------------
    def list(self, filters=None) -> List[SchemaType]:
        with self._lock:
            return [item for item in self._items if _matches(item, filters)]

    # ---------------- CREATE ----------------
    def add(self, obj: SchemaType) -> SchemaType:
        with self._lock:
            self._items.append(obj)
        return obj

    # ---------------- UPDATE ----------------
    def update(self, id, changes, guard=None) -> Optional[SchemaType]:
        with self._lock:
            i = self._index(id)
            if i == -1:
                return None
            current = self._items[i]
            if guard is not None:
                guard(current)
            updated = current.model_copy(update=changes)
            self._items[i] = updated
            return updated

    # ---------------- DELETE ----------------
    def remove(self, id) -> Optional[SchemaType]:
        with self._lock:
            i = self._index(id)
            if i == -1:
                return None
            return self._items.pop(i)


class SQLRepository(Repository[SchemaType]):
    """
    SQLAlchemy-backed repository. The full record is kept as JSON in
    ``payload``; ``columns`` maps filter keys (dotted schema paths) to real
    columns so list filters run in SQL.
    """

    def __init__(
        self,
        model,
        schema: Type[SchemaType],
        session_factory,
        columns: Dict[str, str],
        id_field: str = "id",
        label: Optional[str] = None,
    ):
        self.model = model
        self.schema = schema
        self.session_factory = session_factory
        self.columns = columns
        self.id_field = id_field
        self.label = label or schema.__name__

    def _to_schema(self, row) -> SchemaType:
        return self.schema.model_validate(row.payload)

    def _write(self, row, obj: SchemaType) -> None:
        row.payload = obj.model_dump(mode="json")
        for key, column in self.columns.items():
            setattr(row, column, _plain(resolve(obj, key)))

    def _query(self, db, id):
        pk_column = getattr(self.model, self.id_field)
        return db.query(self.model).filter(pk_column == id)

    def get(self, id) -> Optional[SchemaType]:
        with self.session_factory() as db:
            row = self._query(db, id).first()
            return self._to_schema(row) if row else None

    def list(self, filters=None) -> List[SchemaType]:
        with self.session_factory() as db:
            query = db.query(self.model)
            leftover = {}
            for key, value in (filters or {}).items():
                if value is None:
                    continue
                if key in self.columns:
                    query = query.filter(getattr(self.model, self.columns[key]) == _plain(value))
                else:
                    leftover[key] = value
            rows = query.order_by(self.model.pk).all()
            items = [self._to_schema(row) for row in rows]
        return [item for item in items if _matches(item, leftover)]

    def add(self, obj: SchemaType) -> SchemaType:
        with self.session_factory() as db:
            row = self.model(**{self.id_field: getattr(obj, self.id_field)})
            self._write(row, obj)
            db.add(row)
            db.commit()
        return obj

    def update(self, id, changes, guard=None) -> Optional[SchemaType]:
        with self.session_factory() as db:
            row = self._query(db, id).first()
            if not row:
                return None
            current = self._to_schema(row)
            if guard is not None:
                guard(current)
            updated = current.model_copy(update=changes)
            self._write(row, updated)
            db.add(row)
            db.commit()
            return updated

    def remove(self, id) -> Optional[SchemaType]:
        with self.session_factory() as db:
            row = self._query(db, id).first()
            if not row:
                return None
            obj = self._to_schema(row)
            db.delete(row)
            db.commit()
            return obj


def transition_guard(table, new_status, enforce: bool) -> Optional[Guard]:
    """Build an update guard rejecting moves that the transition table forbids."""
    if not enforce:
        return None

    def guard(current) -> None:
        if not can_transition(table, current.status, new_status):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Cannot change status from {_plain(current.status)} to {_plain(new_status)}",
            )

    return guard
