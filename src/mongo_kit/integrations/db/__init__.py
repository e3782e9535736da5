"""
목적: DB 통합 모듈 공개 API를 제공한다.
설명: 클라이언트, 타입 지정 컬렉션, 옵션 함수와 빌더를 노출한다.
디자인 패턴: 퍼사드
참조: src/mongo_kit/integrations/db/client.py, src/mongo_kit/integrations/db/collection.py
"""

from .base import (
    BaseCollection,
    BaseEntityCollection,
    CollectionOption,
    Entity,
    EnvelopedRecord,
    SetOption,
    add_stage,
    bind_options,
    exclude_deleted,
    new_entity,
    with_filter,
    with_id,
    with_limit,
    with_pipeline,
    with_projection,
    with_skip,
    with_sort,
    with_update,
    wrap_record,
)
from .client import DBClient, open_database
from .collection import Collection, EntityCollection
from .engines import MongoConnectionManager
from .query_builder import OptionBuilder

__all__ = [
    "DBClient",
    "open_database",
    "Collection",
    "EntityCollection",
    "BaseCollection",
    "BaseEntityCollection",
    "MongoConnectionManager",
    "OptionBuilder",
    "Entity",
    "EnvelopedRecord",
    "new_entity",
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
