from __future__ import annotations

from typing import Any, TypeVar

from sqlalchemy import Engine, select
from sqlalchemy.orm import Session

from rms.application.mappers.record_mapper import from_record_document, to_record_document
from rms.application.ports.stores import OrderedRecordStore
from rms.domain.records.registry import ENTITY_DEFINITIONS, EntityDefinition
from rms.infrastructure.db.models.record import RecordModel
from rms.infrastructure.db.session import get_engine

T = TypeVar("T")


class SqlAlchemyRecordStore(OrderedRecordStore[T]):
    """Ordered string-keyed map persisted in the shared ``records`` table.

    Rows are partitioned by ``namespace`` so every store sees only its own
    keys. The engine is resolved on first use when not supplied.
    """

    def __init__(
        self,
        namespace: int,
        entity_type: type[T],
        engine: Engine | None = None,
    ) -> None:
        self._namespace = namespace
        self._entity_type = entity_type
        self._engine = engine

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = get_engine()
        return self._engine

    def insert(self, key: str, value: T) -> None:
        model = RecordModel(
            namespace=self._namespace,
            key=str(key),
            document=to_record_document(value),
        )
        with Session(self.engine) as session:
            session.merge(model)
            session.commit()

    def get(self, key: str) -> T | None:
        with Session(self.engine) as session:
            model = session.get(RecordModel, (self._namespace, str(key)))
            if model is None:
                return None
            document = dict(model.document)
        return from_record_document(self._entity_type, document)

    def values(self) -> list[T]:
        statement = (
            select(RecordModel.document)
            .where(RecordModel.namespace == self._namespace)
            .order_by(RecordModel.key.asc())
        )
        with Session(self.engine) as session:
            documents = list(session.execute(statement).scalars().all())
        return [from_record_document(self._entity_type, document) for document in documents]


def build_record_stores(
    engine: Engine | None = None,
    definitions: tuple[EntityDefinition, ...] = ENTITY_DEFINITIONS,
) -> dict[str, OrderedRecordStore[Any]]:
    return {
        definition.name: SqlAlchemyRecordStore(
            namespace=definition.namespace,
            entity_type=definition.entity_type,
            engine=engine,
        )
        for definition in definitions
    }
