"""
목적: DB 통합 계층에서 공통으로 사용하는 모델을 정의한다.
설명: 엔티티 엔벨로프(_id/created_at/updated_at/deleted_at)와 필터/정렬 DSL 모델을 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/mongo_kit/integrations/db/engines/mongodb/document_mapper.py, src/mongo_kit/integrations/db/query_builder/option_builder.py
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Generic, List, Mapping, Optional, TypeVar, Union

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, model_validator

from mongo_kit.shared.const import EntityFieldConst

ValueT = TypeVar("ValueT")

# 저장 문서를 디코딩할 때 model_validate에 넘기는 검증 컨텍스트 키
DECODE_CONTEXT_KEY = "decode"


def utc_now() -> datetime:
    """UTC 기준의 timezone-aware 현재 시각을 반환한다."""

    return datetime.now(timezone.utc)


class Entity(BaseModel):
    """모든 저장 레코드에 붙는 식별/감사 필드 모델이다.

    레코드 모델이 이 클래스를 상속하면 조회 시 엔벨로프 필드도 함께 채워진다.
    디코딩 컨텍스트에서는 문서에 없는 엔벨로프 필드를 기본값으로 만들지 않고 None으로 둔다
    (프로젝션으로 빠진 필드 등).

    Args:
        id: 문서 식별자(`_id`). 디코딩한 문서에 없으면 None.
        created_at: 생성 시각.
        updated_at: 마지막 갱신 시각.
        deleted_at: 소프트 삭제 시각. 삭제되지 않았으면 None.
    """

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    id: Optional[ObjectId] = Field(default_factory=ObjectId, alias=EntityFieldConst.ID)
    created_at: Optional[datetime] = Field(default_factory=utc_now)
    updated_at: Optional[datetime] = Field(default_factory=utc_now)
    deleted_at: Optional[datetime] = None

    @model_validator(mode="before")
    @classmethod
    def _absent_envelope_as_none(cls, data: Any, info: ValidationInfo) -> Any:
        if not (info.context or {}).get(DECODE_CONTEXT_KEY) or not isinstance(data, Mapping):
            return data
        return {**dict.fromkeys(EntityFieldConst.ALL), **data}

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def to_document(self) -> Dict[str, Any]:
        """저장용 엔벨로프 필드를 반환한다. 값이 None인 필드(미삭제 deleted_at 등)는 키를 쓰지 않는다."""

        document = {
            EntityFieldConst.ID: self.id,
            EntityFieldConst.CREATED_AT: self.created_at,
            EntityFieldConst.UPDATED_AT: self.updated_at,
            EntityFieldConst.DELETED_AT: self.deleted_at,
        }
        return {key: item for key, item in document.items() if item is not None}


class EnvelopedRecord(BaseModel, Generic[ValueT]):
    """엔벨로프와 호출자 값을 묶은 삽입용 레코드이다."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    entity: Entity
    value: ValueT

    def to_document(self) -> Dict[str, Any]:
        """엔벨로프 필드와 값 필드를 같은 레벨로 병합한 문서를 반환한다.

        값 쪽에 엔벨로프와 같은 이름의 필드가 있으면 버리고 엔벨로프 값을 쓴다.
        """

        document = {
            key: item
            for key, item in value_to_document(self.value).items()
            if key not in EntityFieldConst.ALL
        }
        document.update(self.entity.to_document())
        return document


def value_to_document(value: Union[BaseModel, Mapping[str, Any]]) -> Dict[str, Any]:
    """레코드 값을 저장용 dict로 변환한다.

    Entity 하위 모델은 엔벨로프 필드까지 그대로 덤프하되, None인 엔벨로프 필드는 뺀다.
    엔벨로프 병합 시 값 쪽 엔벨로프 필드는 `EnvelopedRecord.to_document`가 버린다.
    """

    if isinstance(value, Entity):
        document = value.model_dump(by_alias=True, exclude=set(Entity.model_fields))
        document.update(Entity.to_document(value))
        return document
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True)
    if isinstance(value, Mapping):
        return dict(value)
    raise TypeError(f"문서로 변환할 수 없는 값입니다: {type(value).__name__}")


def new_entity() -> Entity:
    """새 식별자와 동일한 생성/갱신 시각을 가진 엔벨로프를 만든다."""

    now = utc_now()
    return Entity(id=ObjectId(), created_at=now, updated_at=now)


def wrap_record(value: ValueT) -> EnvelopedRecord[ValueT]:
    """값에 새 엔벨로프를 씌운다."""

    return EnvelopedRecord(entity=new_entity(), value=value)


class FilterOperator(str, Enum):
    """필터 연산자."""

    EQ = "EQ"
    NE = "NE"
    GT = "GT"
    GTE = "GTE"
    LT = "LT"
    LTE = "LTE"
    IN = "IN"
    NOT_IN = "NOT_IN"
    CONTAINS = "CONTAINS"
    EXISTS = "EXISTS"


class FilterCondition(BaseModel):
    """필터 조건."""

    field: str
    operator: FilterOperator
    value: Any


class FilterExpression(BaseModel):
    """필터 표현식."""

    conditions: List[FilterCondition] = Field(default_factory=list)
    logic: str = Field(default="AND", description="조건 결합 논리(AND/OR)")


class SortOrder(int, Enum):
    """정렬 순서. 값은 드라이버 정렬 방향과 같다."""

    ASC = 1
    DESC = -1
