"""
목적: 설정 모듈 공개 API를 제공한다.
설명: 범용 설정 병합 로더와 MongoDB 연결 설정 로더를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/mongo_kit/shared/config/loader.py, src/mongo_kit/shared/config/mongo_config.py
"""

from mongo_kit.shared.config.loader import ConfigLoader
from mongo_kit.shared.config.mongo_config import MongoConfig, load_mongo_config

__all__ = ["ConfigLoader", "MongoConfig", "load_mongo_config"]
