"""
목적: MongoDB 데이터베이스 클라이언트를 제공한다.
설명: 설정 로드, 연결 수명 관리, 타입 지정 컬렉션 생성을 한 곳에서 제공한다.
    `with` 블록을 벗어나면 오류가 나도 연결을 닫는다.
디자인 패턴: 파사드, 컨텍스트 매니저
참조: src/mongo_kit/integrations/db/engines/mongodb/connection.py, src/mongo_kit/integrations/db/collection.py
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Type, TypeVar

from pydantic import BaseModel
from pymongo import MongoClient
from pymongo.database import Database

from mongo_kit.integrations.db.collection import Collection, EntityCollection
from mongo_kit.integrations.db.engines.mongodb.connection import MongoConnectionManager
from mongo_kit.shared.config import MongoConfig, load_mongo_config
from mongo_kit.shared.logging import Logger, create_default_logger

T = TypeVar("T", bound=BaseModel)


class DBClient:
    """MongoDB 데이터베이스 클라이언트.

    Args:
        config: 연결 설정. None이면 환경 변수에서 읽으며 필수 값이 없으면 즉시 실패한다.
        logger: 주입 가능한 로거.
        mongo_client_cls: 클라이언트 클래스(테스트 주입용).
    """

    def __init__(
        self,
        config: Optional[MongoConfig] = None,
        logger: Optional[Logger] = None,
        mongo_client_cls: Any = MongoClient,
    ) -> None:
        self._logger = logger or create_default_logger("DBClient")
        self._config = config or load_mongo_config(logger=self._logger)
        self._connection = MongoConnectionManager(
            self._config,
            logger=self._logger,
            mongo_client_cls=mongo_client_cls,
        )
        self._lock = threading.RLock()

    @property
    def config(self) -> MongoConfig:
        return self._config

    @property
    def database(self) -> Database:
        """연결된 데이터베이스 핸들을 반환한다."""

        return self._connection.database

    def connect(self) -> None:
        """연결을 초기화한다."""

        with self._lock:
            self._connection.connect()

    def close(self) -> None:
        """연결을 종료한다."""

        with self._lock:
            self._connection.close()

    def collection(self, name: str, model: Type[T]) -> Collection[T]:
        """문서를 그대로 다루는 타입 지정 컬렉션을 반환한다."""

        return Collection(self.database[name], model, logger=self._logger)

    def entity_collection(self, name: str, model: Type[T]) -> EntityCollection[T]:
        """엔벨로프 기반 타입 지정 컬렉션을 반환한다."""

        return EntityCollection(self.collection(name, model))

    def __enter__(self) -> "DBClient":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


@contextmanager
def open_database(
    config: Optional[MongoConfig] = None,
    logger: Optional[Logger] = None,
    mongo_client_cls: Any = MongoClient,
) -> Iterator[Database]:
    """연결된 데이터베이스 핸들을 제공하고 블록 종료 시 연결을 닫는다."""

    with DBClient(config, logger=logger, mongo_client_cls=mongo_client_cls) as client:
        yield client.database
