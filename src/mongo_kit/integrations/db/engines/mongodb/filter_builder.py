"""
목적: MongoDB 필터 쿼리 빌더를 제공한다.
설명: FilterExpression 조건 목록을 MongoDB 필터 문서로 변환한다.
디자인 패턴: 빌더 패턴
참조: src/mongo_kit/integrations/db/query_builder/option_builder.py
"""

from __future__ import annotations

import re
from typing import Any, Dict, Optional

from mongo_kit.integrations.db.base.models import (
    FilterCondition,
    FilterExpression,
    FilterOperator,
)

_COMPARISON_OPERATORS = {
    FilterOperator.NE: "$ne",
    FilterOperator.GT: "$gt",
    FilterOperator.GTE: "$gte",
    FilterOperator.LT: "$lt",
    FilterOperator.LTE: "$lte",
}


class MongoFilterBuilder:
    """MongoDB 필터 빌더."""

    def build(self, filter_expression: Optional[FilterExpression]) -> Dict[str, Any]:
        """필터 표현식을 MongoDB 필터로 변환한다.

        AND 조건이 하나면 감싸지 않고 그대로 반환한다.
        """

        if not filter_expression or not filter_expression.conditions:
            return {}
        conditions = [
            self._condition_to_query(condition)
            for condition in filter_expression.conditions
        ]
        if filter_expression.logic == "OR":
            return {"$or": conditions}
        if len(conditions) == 1:
            return conditions[0]
        return {"$and": conditions}

    def _condition_to_query(self, condition: FilterCondition) -> Dict[str, Any]:
        field = condition.field
        operator = condition.operator
        value = condition.value
        if operator == FilterOperator.EQ:
            return {field: value}
        if operator in _COMPARISON_OPERATORS:
            return {field: {_COMPARISON_OPERATORS[operator]: value}}
        if operator in (FilterOperator.IN, FilterOperator.NOT_IN):
            if not isinstance(value, (list, tuple)):
                raise ValueError(f"{operator.value}은 리스트 값이 필요합니다.")
            key = "$in" if operator == FilterOperator.IN else "$nin"
            return {field: {key: list(value)}}
        if operator == FilterOperator.CONTAINS:
            if isinstance(value, str):
                return {field: {"$regex": re.escape(value), "$options": "i"}}
            return {field: {"$in": [value]}}
        if operator == FilterOperator.EXISTS:
            return {field: {"$exists": bool(value)}}
        raise NotImplementedError("지원하지 않는 연산자입니다.")
