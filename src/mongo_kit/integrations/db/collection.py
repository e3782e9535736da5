"""
목적: 레코드 모델 T 하나에 묶인 타입 지정 컬렉션을 제공한다.
설명: `Collection`은 문서를 있는 그대로 다루는 기본 CRUD 계층이고,
    `EntityCollection`은 이를 감싸 삽입 시 엔벨로프를 씌우고 갱신 시각과 소프트 삭제를 기록한다.
    저장소 오류와 디코딩 오류는 감싸지 않고 그대로 전파한다.
디자인 패턴: 어댑터 패턴, 데코레이터 패턴
참조: src/mongo_kit/integrations/db/base/collection.py, src/mongo_kit/integrations/db/base/options.py
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel
from pymongo.client_session import ClientSession
from pymongo.collection import Collection as PyMongoCollection

from mongo_kit.integrations.db.base.collection import BaseCollection, BaseEntityCollection
from mongo_kit.integrations.db.base.options import CollectionOption, SetOption, bind_options
from mongo_kit.integrations.db.engines.mongodb.document_mapper import MongoDocumentMapper
from mongo_kit.shared.exceptions import DocumentNotFoundError
from mongo_kit.shared.logging import LogContext, Logger, create_default_logger

T = TypeVar("T", bound=BaseModel)


class Collection(BaseCollection[T]):
    """문서를 그대로 저장/조회하는 타입 지정 컬렉션.

    pymongo 컬렉션 핸들은 빌려 쓰는 참조이며 이 객체가 닫지 않는다.

    Args:
        raw_collection: pymongo 컬렉션 핸들.
        model_cls: 조회 결과를 디코딩할 모델 클래스.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        raw_collection: PyMongoCollection,
        model_cls: Type[T],
        logger: Optional[Logger] = None,
    ) -> None:
        self._raw = raw_collection
        self._mapper: MongoDocumentMapper[T] = MongoDocumentMapper(model_cls)
        self._logger = (logger or create_default_logger("Collection")).with_context(
            LogContext(collection=raw_collection.name)
        )

    @property
    def name(self) -> str:
        return self._raw.name

    @property
    def raw(self) -> PyMongoCollection:
        """내부 pymongo 컬렉션을 반환한다."""

        return self._raw

    @property
    def model_cls(self) -> Type[T]:
        return self._mapper.model_cls

    @property
    def mapper(self) -> MongoDocumentMapper[T]:
        return self._mapper

    def insert_one(self, model: T, *, session: Optional[ClientSession] = None) -> None:
        self.insert_document(self._mapper.to_document(model), session=session)

    def insert_many(
        self, models: Sequence[T], *, session: Optional[ClientSession] = None
    ) -> None:
        self.insert_documents(
            [self._mapper.to_document(model) for model in models], session=session
        )

    def insert_document(
        self, document: Mapping[str, Any], *, session: Optional[ClientSession] = None
    ) -> None:
        """이미 인코딩된 문서 하나를 삽입한다."""

        self._trace("insert_one")
        self._raw.insert_one(dict(document), session=session)

    def insert_documents(
        self,
        documents: Iterable[Mapping[str, Any]],
        *,
        session: Optional[ClientSession] = None,
    ) -> None:
        """이미 인코딩된 문서 여러 개를 삽입한다. 빈 목록이면 아무 것도 하지 않는다."""

        payload = [dict(document) for document in documents]
        if not payload:
            return
        self._trace("insert_many", count=len(payload))
        self._raw.insert_many(payload, session=session)

    def find_one(self, *options: SetOption, session: Optional[ClientSession] = None) -> T:
        option = bind_options(*options)
        kwargs = option.find_options()
        # find_one은 항상 한 건만 읽으므로 limit은 쓰지 않는다.
        kwargs.pop("limit", None)
        self._trace("find_one")
        data = self._raw.find_one(option.filter, session=session, **kwargs)
        if data is None:
            raise DocumentNotFoundError(self.name, option.filter)
        return self._mapper.from_record(data)

    def find_many(
        self, *options: SetOption, session: Optional[ClientSession] = None
    ) -> List[T]:
        option = bind_options(*options)
        self._trace("find_many")
        cursor = self._raw.find(option.filter, session=session, **option.find_options())
        return [self._mapper.from_record(data) for data in cursor]

    def update_one(self, *options: SetOption, session: Optional[ClientSession] = None) -> None:
        option = bind_options(*options)
        self._trace("update_one")
        self._raw.update_one(option.filter, option.update, session=session)

    def update_many(self, *options: SetOption, session: Optional[ClientSession] = None) -> None:
        option = bind_options(*options)
        self._trace("update_many")
        self._raw.update_many(option.filter, option.update, session=session)

    def delete_one(self, *options: SetOption, session: Optional[ClientSession] = None) -> None:
        option = bind_options(*options)
        self._trace("delete_one")
        self._raw.delete_one(option.filter, session=session)

    def delete_many(self, *options: SetOption, session: Optional[ClientSession] = None) -> None:
        option = bind_options(*options)
        self._trace("delete_many")
        self._raw.delete_many(option.filter, session=session)

    def count(self, *options: SetOption, session: Optional[ClientSession] = None) -> int:
        option = bind_options(*options)
        self._trace("count")
        return self._raw.count_documents(option.filter, session=session)

    def aggregate(
        self, *options: SetOption, session: Optional[ClientSession] = None
    ) -> List[T]:
        option = bind_options(*options)
        self._trace("aggregate", stages=len(option.pipeline))
        cursor = self._raw.aggregate(option.pipeline, session=session)
        return [self._mapper.from_record(data) for data in cursor]

    def _trace(self, operation: str, **metadata: Any) -> None:
        self._logger.debug(
            f"컬렉션 작업 실행: {operation}",
            context=LogContext(operation=operation),
            metadata=metadata or None,
        )


class EntityCollection(BaseEntityCollection[T]):
    """엔벨로프 기반 컬렉션.

    삽입 시 새 엔벨로프를 씌우고, 갱신 시 마지막 옵션으로 updated_at을 기록하며,
    소프트 삭제는 deleted_at만 `$set` 하는 갱신으로 처리한다.
    그 밖의 작업은 내부 `Collection`에 그대로 위임한다.
    """

    def __init__(self, inner: Collection[T]) -> None:
        self._inner = inner

    @property
    def name(self) -> str:
        return self._inner.name

    @property
    def inner(self) -> Collection[T]:
        return self._inner

    def insert_one(self, model: T, *, session: Optional[ClientSession] = None) -> None:
        self._inner.insert_document(
            self._inner.mapper.to_enveloped_document(model), session=session
        )

    def insert_many(
        self, models: Sequence[T], *, session: Optional[ClientSession] = None
    ) -> None:
        mapper = self._inner.mapper
        self._inner.insert_documents(
            [mapper.to_enveloped_document(model) for model in models], session=session
        )

    def find_one(self, *options: SetOption, session: Optional[ClientSession] = None) -> T:
        return self._inner.find_one(*options, session=session)

    def find_many(
        self, *options: SetOption, session: Optional[ClientSession] = None
    ) -> List[T]:
        return self._inner.find_many(*options, session=session)

    def update_one(self, *options: SetOption, session: Optional[ClientSession] = None) -> None:
        self._inner.update_one(*options, _stamp_update, session=session)

    def update_many(self, *options: SetOption, session: Optional[ClientSession] = None) -> None:
        self._inner.update_many(*options, _stamp_update, session=session)

    def soft_delete_one(
        self, *options: SetOption, session: Optional[ClientSession] = None
    ) -> None:
        self._inner.update_one(*options, _stamp_soft_delete, session=session)

    def soft_delete_many(
        self, *options: SetOption, session: Optional[ClientSession] = None
    ) -> None:
        self._inner.update_many(*options, _stamp_soft_delete, session=session)

    def delete_one(self, *options: SetOption, session: Optional[ClientSession] = None) -> None:
        self._inner.delete_one(*options, session=session)

    def delete_many(self, *options: SetOption, session: Optional[ClientSession] = None) -> None:
        self._inner.delete_many(*options, session=session)

    def count(self, *options: SetOption, session: Optional[ClientSession] = None) -> int:
        return self._inner.count(*options, session=session)

    def aggregate(
        self, *options: SetOption, session: Optional[ClientSession] = None
    ) -> List[T]:
        return self._inner.aggregate(*options, session=session)


def _stamp_update(option: CollectionOption) -> None:
    option.apply_update_stamp()


def _stamp_soft_delete(option: CollectionOption) -> None:
    option.apply_soft_delete_stamp()
