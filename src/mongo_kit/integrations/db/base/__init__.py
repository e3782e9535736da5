"""
목적: DB 베이스 모듈 공개 API를 제공한다.
설명: 엔벨로프/필터 모델, 옵션 모델과 변경 함수, 컬렉션 인터페이스를 노출한다.
디자인 패턴: 퍼사드
참조: src/mongo_kit/integrations/db/base/models.py, src/mongo_kit/integrations/db/base/options.py, src/mongo_kit/integrations/db/base/collection.py
"""

from mongo_kit.integrations.db.base.collection import BaseCollection, BaseEntityCollection
from mongo_kit.integrations.db.base.models import (
    Entity,
    EnvelopedRecord,
    FilterCondition,
    FilterExpression,
    FilterOperator,
    SortOrder,
    new_entity,
    utc_now,
    value_to_document,
    wrap_record,
)
from mongo_kit.integrations.db.base.options import (
    CollectionOption,
    SetOption,
    add_stage,
    bind_options,
    exclude_deleted,
    with_filter,
    with_id,
    with_limit,
    with_pipeline,
    with_projection,
    with_skip,
    with_sort,
    with_update,
)

__all__ = [
    "BaseCollection",
    "BaseEntityCollection",
    "Entity",
    "EnvelopedRecord",
    "FilterCondition",
    "FilterExpression",
    "FilterOperator",
    "SortOrder",
    "new_entity",
    "utc_now",
    "value_to_document",
    "wrap_record",
    "CollectionOption",
    "SetOption",
    "bind_options",
    "with_filter",
    "with_update",
    "with_sort",
    "with_projection",
    "with_pipeline",
    "add_stage",
    "with_skip",
    "with_limit",
    "with_id",
    "exclude_deleted",
]
