"""
목적: DB 엔진 패키지를 정의한다.
설명: 현재는 MongoDB 엔진만 제공한다.
디자인 패턴: 퍼사드
참조: src/mongo_kit/integrations/db/engines/mongodb/__init__.py
"""

from mongo_kit.integrations.db.engines.mongodb import (
    MongoConnectionManager,
    MongoDocumentMapper,
    MongoFilterBuilder,
)

__all__ = ["MongoConnectionManager", "MongoDocumentMapper", "MongoFilterBuilder"]
