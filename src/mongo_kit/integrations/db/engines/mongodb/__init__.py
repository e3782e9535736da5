"""
목적: MongoDB 엔진 공개 API를 제공한다.
설명: 연결 관리자, 문서 매퍼, 필터 빌더를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/mongo_kit/integrations/db/engines/mongodb/connection.py
"""

from mongo_kit.integrations.db.engines.mongodb.connection import MongoConnectionManager
from mongo_kit.integrations.db.engines.mongodb.document_mapper import MongoDocumentMapper
from mongo_kit.integrations.db.engines.mongodb.filter_builder import MongoFilterBuilder

__all__ = ["MongoConnectionManager", "MongoDocumentMapper", "MongoFilterBuilder"]
