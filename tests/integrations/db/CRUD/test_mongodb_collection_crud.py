"""
목적: 실제 MongoDB에서 엔벨로프 컬렉션의 CRUD 동작을 검증한다.
설명: MGO_* 환경 변수가 있을 때만 실행하며, 임시 컬렉션을 만들고 끝나면 삭제한다.
디자인 패턴: 테스트 케이스
참조: src/mongo_kit/integrations/db/client.py, src/mongo_kit/integrations/db/collection.py
"""

from __future__ import annotations

import logging
import os
import uuid

import pymongo
import pytest

from mongo_kit.integrations.db import (
    DBClient,
    Entity,
    OptionBuilder,
    exclude_deleted,
    with_filter,
    with_id,
    with_limit,
    with_pipeline,
    with_sort,
    with_update,
)
from mongo_kit.shared.exceptions import DocumentNotFoundError


_LOGGER = logging.getLogger("tests.crud")
_REQUIRED_ENV = ("MGO_ADDRS", "MGO_NAME", "MGO_AUTH_SOURCE", "MGO_USER", "MGO_PASSWORD")


class Member(Entity):
    name: str
    score: int = 0


def _log_step(action: str, **context) -> None:
    """CRUD 단계별 동작을 로깅한다."""

    if context:
        payload = ", ".join(f"{key}={value}" for key, value in context.items())
        _LOGGER.info("%s | %s", action, payload)
        return
    _LOGGER.info("%s", action)


def _require_env() -> None:
    if not all(os.getenv(key) for key in _REQUIRED_ENV):
        pytest.skip("MGO_ADDRS/MGO_NAME/MGO_AUTH_SOURCE/MGO_USER/MGO_PASSWORD 환경 변수가 필요합니다.")


def _collection_name(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:8]}"


def test_mongodb_entity_collection_crud() -> None:
    """엔벨로프 컬렉션의 삽입/조회/갱신/소프트 삭제/집계를 검증한다."""

    _require_env()

    _log_step("클라이언트 생성")
    with DBClient() as client:
        name = _collection_name("members")
        _log_step("컬렉션 준비", name=name)
        members = client.entity_collection(name, Member)
        try:
            _log_step("문서 저장", name="a")
            members.insert_one(Member(name="a", score=1))
            assert members.count() == 1

            _log_step("문서 조회", name="a")
            stored = members.find_one(with_filter({"name": "a"}))
            assert stored.created_at == stored.updated_at
            assert stored.deleted_at is None

            _log_step("식별자 조회", doc_id=stored.id)
            assert members.find_one(with_id(stored.id)).name == "a"

            _log_step("문서 갱신", name="a")
            members.update_one(with_id(stored.id), with_update({"$set": {"score": 5}}))
            updated = members.find_one(with_id(stored.id))
            assert updated.score == 5
            assert updated.updated_at >= stored.updated_at

            _log_step("소프트 삭제", name="a")
            members.soft_delete_one(with_id(stored.id))
            deleted = members.find_one(with_filter({"deleted_at": {"$exists": True}}))
            assert deleted.id == stored.id
            assert members.count() == 1
            assert members.find_many(exclude_deleted()) == []

            _log_step("문서 배치 저장", count=3)
            members.insert_many([Member(name="a"), Member(name="b", score=2), Member(name="c", score=3)])

            _log_step("집계", stage="$match")
            matched = members.aggregate(with_pipeline([{"$match": {"name": "a"}}]))
            assert len(matched) == 2

            _log_step("DSL 조회", field="score", op="gte", value=2)
            options = OptionBuilder().where("score").gte(2).order_by("score").desc().build()
            ranked = members.find_many(*options, with_limit(2))
            assert [member.score for member in ranked] == [5, 3]

            _log_step("타임아웃 범위 조회")
            with pymongo.timeout(5):
                assert len(members.find_many(with_sort({"name": 1}))) == 4

            _log_step("문서 삭제")
            members.delete_many()
            with pytest.raises(DocumentNotFoundError):
                members.find_one()
        finally:
            _log_step("컬렉션 삭제", name=name)
            client.database.drop_collection(name)
    _log_step("연결 종료")
