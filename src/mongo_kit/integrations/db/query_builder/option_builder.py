"""
목적: 체이닝 DSL로 컬렉션 옵션 목록을 만드는 빌더를 제공한다.
설명: 필터/정렬/프로젝션/페이지네이션/업데이트/파이프라인을 누적한 뒤
    `build()`에서 옵션 변경 함수 목록으로 변환한다.
디자인 패턴: 빌더 패턴
참조: src/mongo_kit/integrations/db/base/options.py, src/mongo_kit/integrations/db/engines/mongodb/filter_builder.py
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from mongo_kit.integrations.db.base.models import (
    FilterCondition,
    FilterExpression,
    FilterOperator,
    SortOrder,
)
from mongo_kit.integrations.db.base.options import (
    SetOption,
    add_stage,
    with_filter,
    with_limit,
    with_projection,
    with_skip,
    with_sort,
    with_update,
)
from mongo_kit.integrations.db.engines.mongodb.filter_builder import MongoFilterBuilder
from mongo_kit.shared.const import UpdateOperatorConst


class OptionBuilder:
    """컬렉션 옵션 DSL 빌더.

    Example:
        options = (
            OptionBuilder()
            .where("name").eq("a")
            .order_by("created_at").desc()
            .limit(10)
            .build()
        )
        users.find_many(*options)
    """

    def __init__(self, filter_builder: Optional[MongoFilterBuilder] = None) -> None:
        self._filter_builder = filter_builder or MongoFilterBuilder()
        self.reset()

    def where(self, field: str) -> "OptionBuilder":
        """필터 대상 필드를 지정한다."""

        self._pending_field = field
        return self

    def and_(self) -> "OptionBuilder":
        self._logic = "AND"
        return self

    def or_(self) -> "OptionBuilder":
        self._logic = "OR"
        return self

    def eq(self, value: Any) -> "OptionBuilder":
        return self._add_condition(FilterOperator.EQ, value)

    def ne(self, value: Any) -> "OptionBuilder":
        return self._add_condition(FilterOperator.NE, value)

    def gt(self, value: Any) -> "OptionBuilder":
        return self._add_condition(FilterOperator.GT, value)

    def gte(self, value: Any) -> "OptionBuilder":
        return self._add_condition(FilterOperator.GTE, value)

    def lt(self, value: Any) -> "OptionBuilder":
        return self._add_condition(FilterOperator.LT, value)

    def lte(self, value: Any) -> "OptionBuilder":
        return self._add_condition(FilterOperator.LTE, value)

    def in_(self, values: List[Any]) -> "OptionBuilder":
        return self._add_condition(FilterOperator.IN, values)

    def not_in(self, values: List[Any]) -> "OptionBuilder":
        return self._add_condition(FilterOperator.NOT_IN, values)

    def contains(self, value: Any) -> "OptionBuilder":
        """포함 조건을 추가한다. 문자열이면 대소문자 무시 부분 일치이다."""

        return self._add_condition(FilterOperator.CONTAINS, value)

    def exists(self, flag: bool = True) -> "OptionBuilder":
        return self._add_condition(FilterOperator.EXISTS, flag)

    def order_by(self, field: str) -> "OptionBuilder":
        """정렬 필드를 지정한다. 이어서 asc()/desc()를 호출해야 한다."""

        self._pending_sort_field = field
        return self

    def asc(self) -> "OptionBuilder":
        return self._add_sort(SortOrder.ASC)

    def desc(self) -> "OptionBuilder":
        return self._add_sort(SortOrder.DESC)

    def select(self, *fields: str) -> "OptionBuilder":
        """포함할 필드를 프로젝션에 추가한다."""

        for field in fields:
            self._projection[field] = 1
        return self

    def exclude(self, *fields: str) -> "OptionBuilder":
        """제외할 필드를 프로젝션에 추가한다."""

        for field in fields:
            self._projection[field] = 0
        return self

    def skip(self, value: int) -> "OptionBuilder":
        if value < 0:
            raise ValueError("skip은 0 이상이어야 합니다.")
        self._skip = value
        return self

    def limit(self, value: int) -> "OptionBuilder":
        if value < 1:
            raise ValueError("limit은 1 이상이어야 합니다.")
        self._limit = value
        return self

    def set(self, field: str, value: Any) -> "OptionBuilder":
        return self._add_update(UpdateOperatorConst.SET, field, value)

    def unset(self, field: str) -> "OptionBuilder":
        return self._add_update(UpdateOperatorConst.UNSET, field, "")

    def inc(self, field: str, amount: int | float = 1) -> "OptionBuilder":
        return self._add_update(UpdateOperatorConst.INC, field, amount)

    def stage(self, stage: Dict[str, Any]) -> "OptionBuilder":
        """집계 파이프라인 스테이지를 추가한다."""

        self._stages.append(dict(stage))
        return self

    def build(self) -> List[SetOption]:
        """누적된 상태를 옵션 변경 함수 목록으로 변환한다.

        설정하지 않은 항목은 목록에 넣지 않는다.
        """

        options: List[SetOption] = []
        if self._conditions:
            expression = FilterExpression(conditions=list(self._conditions), logic=self._logic)
            options.append(with_filter(self._filter_builder.build(expression)))
        if self._update:
            options.append(
                with_update({key: dict(value) for key, value in self._update.items()})
            )
        if self._sort:
            options.append(with_sort(dict(self._sort)))
        if self._projection:
            options.append(with_projection(dict(self._projection)))
        if self._skip is not None:
            options.append(with_skip(self._skip))
        if self._limit is not None:
            options.append(with_limit(self._limit))
        options.extend(add_stage(stage) for stage in self._stages)
        return options

    def reset(self) -> "OptionBuilder":
        """빌더 상태를 초기화한다."""

        self._conditions: List[FilterCondition] = []
        self._logic = "AND"
        self._pending_field: Optional[str] = None
        self._pending_sort_field: Optional[str] = None
        self._sort: Dict[str, int] = {}
        self._projection: Dict[str, int] = {}
        self._skip: Optional[int] = None
        self._limit: Optional[int] = None
        self._update: Dict[str, Dict[str, Any]] = {}
        self._stages: List[Dict[str, Any]] = []
        return self

    def _add_condition(self, operator: FilterOperator, value: Any) -> "OptionBuilder":
        if self._pending_field is None:
            raise ValueError("where()로 필드를 먼저 지정해야 합니다.")
        self._conditions.append(
            FilterCondition(field=self._pending_field, operator=operator, value=value)
        )
        self._pending_field = None
        return self

    def _add_sort(self, order: SortOrder) -> "OptionBuilder":
        if self._pending_sort_field is None:
            raise ValueError("order_by()로 필드를 먼저 지정해야 합니다.")
        self._sort[self._pending_sort_field] = order.value
        self._pending_sort_field = None
        return self

    def _add_update(self, operator: str, field: str, value: Any) -> "OptionBuilder":
        self._update.setdefault(operator, {})[field] = value
        return self
