"""
목적: 서버 없이 컬렉션 동작을 검증하기 위한 인메모리 pymongo 대역을 제공한다.
설명: 등치/None 매칭/비교 연산자/$exists/$and/$or 필터, $set/$unset/$inc 업데이트,
    정렬/skip/limit/프로젝션, $match/$sort/$skip/$limit 파이프라인을 흉내 낸다.
디자인 패턴: 테스트 더블(Fake)
참조: src/mongo_kit/integrations/db/collection.py
"""

from __future__ import annotations

import copy
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional

import pytest

from mongo_kit.integrations.db.base import models as base_models
from mongo_kit.integrations.db.base import options as base_options

_MISSING = object()


class FakeCollection:
    """pymongo Collection 인터페이스 일부를 흉내 내는 인메모리 컬렉션."""

    def __init__(self, name: str = "items") -> None:
        self.name = name
        self.documents: List[Dict[str, Any]] = []
        self.calls: List[Dict[str, Any]] = []

    def insert_one(self, document: Dict[str, Any], session: Any = None) -> None:
        self._record("insert_one", session, document=document)
        self.documents.append(copy.deepcopy(document))

    def insert_many(self, documents: List[Dict[str, Any]], session: Any = None) -> None:
        if not documents:
            raise TypeError("documents must be a non-empty list")
        self._record("insert_many", session, documents=documents)
        self.documents.extend(copy.deepcopy(doc) for doc in documents)

    def find_one(
        self,
        filter: Dict[str, Any],
        session: Any = None,
        **kwargs: Any,
    ) -> Optional[Dict[str, Any]]:
        self._record("find_one", session, filter=filter, **kwargs)
        found = self._select(filter, limit=1, **kwargs)
        return found[0] if found else None

    def find(self, filter: Dict[str, Any], session: Any = None, **kwargs: Any) -> List[Dict[str, Any]]:
        self._record("find", session, filter=filter, **kwargs)
        return self._select(filter, **kwargs)

    def update_one(self, filter: Dict[str, Any], update: Dict[str, Any], session: Any = None) -> None:
        self._record("update_one", session, filter=filter, update=update)
        for document in self.documents:
            if _matches(document, filter):
                _apply_update(document, update)
                return

    def update_many(self, filter: Dict[str, Any], update: Dict[str, Any], session: Any = None) -> None:
        self._record("update_many", session, filter=filter, update=update)
        for document in self.documents:
            if _matches(document, filter):
                _apply_update(document, update)

    def delete_one(self, filter: Dict[str, Any], session: Any = None) -> None:
        self._record("delete_one", session, filter=filter)
        for index, document in enumerate(self.documents):
            if _matches(document, filter):
                del self.documents[index]
                return

    def delete_many(self, filter: Dict[str, Any], session: Any = None) -> None:
        self._record("delete_many", session, filter=filter)
        self.documents = [doc for doc in self.documents if not _matches(doc, filter)]

    def count_documents(self, filter: Dict[str, Any], session: Any = None) -> int:
        self._record("count_documents", session, filter=filter)
        return sum(1 for doc in self.documents if _matches(doc, filter))

    def aggregate(self, pipeline: List[Dict[str, Any]], session: Any = None) -> List[Dict[str, Any]]:
        self._record("aggregate", session, pipeline=pipeline)
        rows = [copy.deepcopy(doc) for doc in self.documents]
        for stage in pipeline:
            (operator, argument), = stage.items()
            if operator == "$match":
                rows = [row for row in rows if _matches(row, argument)]
            elif operator == "$sort":
                rows = _sorted(rows, list(argument.items()))
            elif operator == "$skip":
                rows = rows[argument:]
            elif operator == "$limit":
                rows = rows[:argument]
            else:
                raise NotImplementedError(operator)
        return rows

    def last_call(self, operation: str) -> Dict[str, Any]:
        for call in reversed(self.calls):
            if call["operation"] == operation:
                return call
        raise AssertionError(f"{operation} 호출 기록이 없습니다.")

    def _record(self, operation: str, session: Any, **kwargs: Any) -> None:
        self.calls.append({"operation": operation, "session": session, **copy.deepcopy(kwargs)})

    def _select(
        self,
        filter: Dict[str, Any],
        sort: Optional[List[Any]] = None,
        projection: Optional[Dict[str, Any]] = None,
        skip: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        rows = [copy.deepcopy(doc) for doc in self.documents if _matches(doc, filter)]
        if sort:
            rows = _sorted(rows, sort)
        if skip:
            rows = rows[skip:]
        if limit:
            rows = rows[:limit]
        if projection:
            rows = [_project(row, projection) for row in rows]
        return rows


def _matches(document: Dict[str, Any], filter: Dict[str, Any]) -> bool:
    for key, condition in filter.items():
        if key == "$and":
            if not all(_matches(document, item) for item in condition):
                return False
            continue
        if key == "$or":
            if not any(_matches(document, item) for item in condition):
                return False
            continue
        value = document.get(key, _MISSING)
        if isinstance(condition, dict) and condition and all(k.startswith("$") for k in condition):
            if not all(_check(value, op, arg) for op, arg in condition.items()):
                return False
            continue
        if condition is None:
            if value is not _MISSING and value is not None:
                return False
            continue
        if value is _MISSING or value != condition:
            return False
    return True


def _check(value: Any, operator: str, argument: Any) -> bool:
    if operator == "$exists":
        return (value is not _MISSING) == bool(argument)
    if operator == "$ne":
        return value is _MISSING or value != argument
    if operator == "$in":
        return value is not _MISSING and value in argument
    if operator == "$nin":
        return value is _MISSING or value not in argument
    if value is _MISSING:
        return False
    if operator == "$gt":
        return value > argument
    if operator == "$gte":
        return value >= argument
    if operator == "$lt":
        return value < argument
    if operator == "$lte":
        return value <= argument
    raise NotImplementedError(operator)


def _apply_update(document: Dict[str, Any], update: Dict[str, Any]) -> None:
    for operator, fields in update.items():
        if operator == "$set":
            document.update(fields)
        elif operator == "$unset":
            for field in fields:
                document.pop(field, None)
        elif operator == "$inc":
            for field, amount in fields.items():
                document[field] = document.get(field, 0) + amount
        else:
            raise NotImplementedError(operator)


def _sorted(rows: List[Dict[str, Any]], sort: Iterable[Any]) -> List[Dict[str, Any]]:
    result = list(rows)
    for field, direction in reversed(list(sort)):
        result.sort(key=lambda row: row.get(field), reverse=int(direction) < 0)
    return result


def _project(row: Dict[str, Any], projection: Dict[str, Any]) -> Dict[str, Any]:
    included = [field for field, flag in projection.items() if flag]
    if included:
        keep = set(included) | ({"_id"} if projection.get("_id", 1) else set())
        return {key: value for key, value in row.items() if key in keep}
    return {key: value for key, value in row.items() if key not in projection}


class TickingClock:
    """호출마다 1초씩 증가하는 UTC 시계."""

    def __init__(self) -> None:
        self._current = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self._current += timedelta(seconds=1)
        return self._current


@pytest.fixture
def fake_collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture
def ticking_clock(monkeypatch: pytest.MonkeyPatch) -> TickingClock:
    """엔벨로프/스탬프에 쓰이는 현재 시각을 결정적으로 만든다."""

    clock = TickingClock()
    monkeypatch.setattr(base_models, "utc_now", clock)
    monkeypatch.setattr(base_options, "utc_now", clock)
    return clock
