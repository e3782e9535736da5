"""
목적: MongoDB 문서 매퍼 모듈을 제공한다.
설명: 레코드 모델 T와 MongoDB 문서 간 변환, 삽입 시 엔벨로프 병합을 담당한다.
디자인 패턴: 매퍼 패턴
참조: src/mongo_kit/integrations/db/base/models.py
"""

from __future__ import annotations

from typing import Any, Dict, Generic, Mapping, Type, TypeVar

from pydantic import BaseModel

from mongo_kit.integrations.db.base.models import (
    DECODE_CONTEXT_KEY,
    value_to_document,
    wrap_record,
)

T = TypeVar("T", bound=BaseModel)


class MongoDocumentMapper(Generic[T]):
    """MongoDB 문서 매퍼."""

    def __init__(self, model_cls: Type[T]) -> None:
        self._model_cls = model_cls

    @property
    def model_cls(self) -> Type[T]:
        return self._model_cls

    def to_document(self, model: T) -> Dict[str, Any]:
        """모델을 alias 기준으로 그대로 덤프한다. Entity 하위 모델의 식별자와 시각도 유지한다."""

        return value_to_document(model)

    def to_enveloped_document(self, model: T) -> Dict[str, Any]:
        """새 엔벨로프를 씌운 저장용 문서를 만든다."""

        return wrap_record(model).to_document()

    def from_record(self, data: Mapping[str, Any]) -> T:
        """MongoDB 문서를 모델로 검증/변환한다. 모델에 없는 필드는 무시된다.

        디코딩 컨텍스트로 검증하므로 문서에 없는 엔벨로프 필드는 None이 된다.
        """

        return self._model_cls.model_validate(dict(data), context={DECODE_CONTEXT_KEY: True})
