"""
목적: 컬렉션 작업별 옵션 모델과 옵션 변경 함수를 제공한다.
설명: 필터/업데이트/정렬/프로젝션/파이프라인/skip/limit을 담는 호출 단위 옵션을
    변경 함수 목록을 순서대로 적용해 만든다. 같은 필드를 건드리면 마지막 값이 남는다.
디자인 패턴: 함수형 옵션 패턴
참조: src/mongo_kit/integrations/db/collection.py, src/mongo_kit/integrations/db/query_builder/option_builder.py
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field

from mongo_kit.integrations.db.base.models import utc_now
from mongo_kit.shared.const import EntityFieldConst, UpdateOperatorConst


class CollectionOption(BaseModel):
    """한 번의 컬렉션 호출에 쓰이는 옵션이다.

    기본값은 "전체 매칭, 변경 없음, 정렬 없음, 프로젝션 없음, 페이지네이션 없음"을 뜻한다.

    Args:
        filter: 선택 조건 문서.
        update: 업데이트 문서.
        sort: 필드별 정렬 방향.
        projection: 포함/제외 필드 문서.
        pipeline: 집계 스테이지 목록.
        skip: 건너뛸 문서 수. None이면 오프셋 없음.
        limit: 최대 문서 수. None이면 제한 없음.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    filter: Dict[str, Any] = Field(default_factory=dict)
    update: Dict[str, Any] = Field(default_factory=dict)
    sort: Dict[str, Any] = Field(default_factory=dict)
    projection: Dict[str, Any] = Field(default_factory=dict)
    pipeline: List[Dict[str, Any]] = Field(default_factory=list)
    skip: Optional[int] = None
    limit: Optional[int] = None

    def find_options(self) -> Dict[str, Any]:
        """`Collection.find` 키워드 인자를 만든다.

        skip/limit이 없으면 키 자체를 넣지 않는다.
        """

        kwargs: Dict[str, Any] = {}
        if self.sort:
            kwargs["sort"] = list(self.sort.items())
        if self.projection:
            kwargs["projection"] = dict(self.projection)
        if self.skip is not None:
            kwargs["skip"] = self.skip
        if self.limit is not None:
            kwargs["limit"] = self.limit
        return kwargs

    def apply_update_stamp(self, now: Optional[datetime] = None) -> None:
        """`$set`에 updated_at을 병합한다. 호출자가 넣은 `$set` 필드는 유지한다."""

        stamp = {EntityFieldConst.UPDATED_AT: now or utc_now()}
        update = dict(self.update)
        current = update.get(UpdateOperatorConst.SET)
        update[UpdateOperatorConst.SET] = {**current, **stamp} if current else stamp
        self.update = update

    def apply_soft_delete_stamp(self, now: Optional[datetime] = None) -> None:
        """`$set` 전체를 `{deleted_at: now}`로 교체한다.

        같은 호출에서 넘어온 다른 `$set` 필드는 버려진다. 다른 연산자는 유지한다.
        """

        update = dict(self.update)
        update[UpdateOperatorConst.SET] = {EntityFieldConst.DELETED_AT: now or utc_now()}
        self.update = update


SetOption = Callable[[CollectionOption], None]


def bind_options(*options: SetOption) -> CollectionOption:
    """빈 옵션에 변경 함수를 순서대로 적용해 반환한다."""

    option = CollectionOption()
    for apply in options:
        apply(option)
    return option


def with_filter(filter_query: Mapping[str, Any]) -> SetOption:
    def apply(option: CollectionOption) -> None:
        option.filter = dict(filter_query)

    return apply


def with_update(update: Mapping[str, Any]) -> SetOption:
    def apply(option: CollectionOption) -> None:
        option.update = dict(update)

    return apply


def with_sort(sort: Mapping[str, Any]) -> SetOption:
    """정렬을 지정한다. dict 순서가 정렬 우선순위가 된다."""

    def apply(option: CollectionOption) -> None:
        option.sort = dict(sort)

    return apply


def with_projection(projection: Mapping[str, Any]) -> SetOption:
    def apply(option: CollectionOption) -> None:
        option.projection = dict(projection)

    return apply


def with_pipeline(pipeline: Sequence[Mapping[str, Any]]) -> SetOption:
    def apply(option: CollectionOption) -> None:
        option.pipeline = [dict(stage) for stage in pipeline]

    return apply


def add_stage(stage: Mapping[str, Any]) -> SetOption:
    """기존 파이프라인 뒤에 스테이지 하나를 덧붙인다."""

    def apply(option: CollectionOption) -> None:
        option.pipeline = [*option.pipeline, dict(stage)]

    return apply


def with_skip(skip: int) -> SetOption:
    if skip < 0:
        raise ValueError("skip은 0 이상이어야 합니다.")

    def apply(option: CollectionOption) -> None:
        option.skip = skip

    return apply


def with_limit(limit: int) -> SetOption:
    """최대 문서 수를 지정한다. 드라이버는 limit=0을 무제한으로 해석하므로 1 이상만 받는다."""

    if limit < 1:
        raise ValueError("limit은 1 이상이어야 합니다.")

    def apply(option: CollectionOption) -> None:
        option.limit = limit

    return apply


def with_id(doc_id: Union[ObjectId, str]) -> SetOption:
    """`_id` 일치 필터를 지정한다. ObjectId hex 문자열은 ObjectId로 바꾼다."""

    if isinstance(doc_id, str) and ObjectId.is_valid(doc_id):
        doc_id = ObjectId(doc_id)
    return with_filter({EntityFieldConst.ID: doc_id})


def exclude_deleted() -> SetOption:
    """현재 필터에 `deleted_at: None` 조건을 더한다.

    deleted_at 키가 없거나 null인 문서만 매칭된다.
    """

    def apply(option: CollectionOption) -> None:
        option.filter = {**option.filter, EntityFieldConst.DELETED_AT: None}

    return apply
