from __future__ import annotations

from typing import Any, Dict, Generic, Optional, Type, TypeVar

from sqlalchemy.orm import Session

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """Generic repository wrapping keyed CRUD operations.

    Writes are flushed but never committed; committing belongs to the caller's
    unit of work.
    """

    def __init__(self, session: Session, model: Type[T]):
        self.session = session
        self.model = model

    def find(self, identifier: Any) -> Optional[T]:
        return self.session.get(self.model, identifier)

    def create(self, data: Dict[str, Any]) -> T:
        instance = self.model(**data)
        self.session.add(instance)
        self.session.flush()
        return instance

    def update(self, identifier: Any, updates: Dict[str, Any]) -> T:
        instance = self.find(identifier)
        if instance is None:
            raise LookupError(f"{self.model.__name__} with id {identifier} not found")
        for field, value in updates.items():
            setattr(instance, field, value)
        self.session.flush()
        return instance

    def delete(self, identifier: Any) -> None:
        instance = self.find(identifier)
        if instance is not None:
            self.session.delete(instance)
            self.session.flush()
