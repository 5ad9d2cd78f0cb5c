"""Shared CRUD plumbing for the per-entity repositories."""

from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Session

from academia.core.errors import NotFoundError
from academia.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Session-backed persistence for one table. Subclasses set `model` and `not_found_message`."""

    model: type[ModelT]
    not_found_message: str = "Registro no encontrado"

    def __init__(self, db: Session) -> None:
        """Store the request-scoped session used for every query."""
        self._db = db

    def get(self, pk: int) -> ModelT | None:
        """Return the row with primary key `pk`, or None."""
        return self._db.get(self.model, pk)

    def get_or_404(self, pk: int) -> ModelT:
        """Return the row with primary key `pk` or raise NotFoundError."""
        obj = self.get(pk)
        if obj is None:
            raise NotFoundError(self.not_found_message)
        return obj

    def create(self, **values: Any) -> ModelT:
        """Insert a row and return it with server defaults loaded."""
        obj = self.model(**values)
        self._db.add(obj)
        self._db.commit()
        self._db.refresh(obj)
        return obj

    def update(self, obj: ModelT, **values: Any) -> ModelT:
        """Apply `values` to `obj` and commit."""
        for name, value in values.items():
            setattr(obj, name, value)
        self._db.commit()
        self._db.refresh(obj)
        return obj

    def set_estado(self, obj: ModelT, estado: Any) -> ModelT:
        """Soft delete or restore: rows are never physically removed."""
        return self.update(obj, estado=estado)
