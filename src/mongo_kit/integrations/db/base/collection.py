"""
목적: 타입 지정 컬렉션의 추상 인터페이스를 정의한다.
설명: 레코드 모델 T 하나에 묶인 CRUD/카운트/집계 계약과, 엔벨로프 기반 소프트 삭제 확장 계약을 제공한다.
디자인 패턴: 전략 패턴, 제네릭 저장소 패턴
참조: src/mongo_kit/integrations/db/base/options.py, src/mongo_kit/integrations/db/collection.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Sequence, TypeVar

from pydantic import BaseModel
from pymongo.client_session import ClientSession

from mongo_kit.integrations.db.base.options import SetOption

T = TypeVar("T", bound=BaseModel)


class BaseCollection(ABC, Generic[T]):
    """타입 지정 컬렉션 인터페이스.

    모든 작업은 `session` 키워드를 드라이버 호출에 그대로 전달한다.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """컬렉션 이름을 반환한다."""

    @abstractmethod
    def insert_one(self, model: T, *, session: Optional[ClientSession] = None) -> None:
        """문서 하나를 삽입한다."""

    @abstractmethod
    def insert_many(
        self, models: Sequence[T], *, session: Optional[ClientSession] = None
    ) -> None:
        """문서 여러 개를 삽입한다."""

    @abstractmethod
    def find_one(self, *options: SetOption, session: Optional[ClientSession] = None) -> T:
        """조건에 맞는 문서 하나를 조회한다. 없으면 DocumentNotFoundError."""

    @abstractmethod
    def find_many(
        self, *options: SetOption, session: Optional[ClientSession] = None
    ) -> List[T]:
        """조건에 맞는 문서 목록을 조회한다."""

    @abstractmethod
    def update_one(self, *options: SetOption, session: Optional[ClientSession] = None) -> None:
        """조건에 맞는 문서 하나를 갱신한다."""

    @abstractmethod
    def update_many(self, *options: SetOption, session: Optional[ClientSession] = None) -> None:
        """조건에 맞는 문서 전체를 갱신한다."""

    @abstractmethod
    def delete_one(self, *options: SetOption, session: Optional[ClientSession] = None) -> None:
        """조건에 맞는 문서 하나를 삭제한다."""

    @abstractmethod
    def delete_many(self, *options: SetOption, session: Optional[ClientSession] = None) -> None:
        """조건에 맞는 문서 전체를 삭제한다."""

    @abstractmethod
    def count(self, *options: SetOption, session: Optional[ClientSession] = None) -> int:
        """조건에 맞는 문서 수를 반환한다."""

    @abstractmethod
    def aggregate(
        self, *options: SetOption, session: Optional[ClientSession] = None
    ) -> List[T]:
        """파이프라인 집계 결과를 T 목록으로 반환한다."""


class BaseEntityCollection(BaseCollection[T]):
    """엔벨로프를 씌워 저장하고 소프트 삭제를 지원하는 컬렉션 인터페이스."""

    @abstractmethod
    def soft_delete_one(
        self, *options: SetOption, session: Optional[ClientSession] = None
    ) -> None:
        """조건에 맞는 문서 하나에 deleted_at을 기록한다."""

    @abstractmethod
    def soft_delete_many(
        self, *options: SetOption, session: Optional[ClientSession] = None
    ) -> None:
        """조건에 맞는 문서 전체에 deleted_at을 기록한다."""
