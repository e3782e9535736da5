"""
목적: shared 패키지의 공개 API를 제공한다.
설명: 설정, 예외, 로깅, 상수 모듈에 대한 접근 포인트를 제공한다.
디자인 패턴: 퍼사드
참조: src/mongo_kit/shared/config, src/mongo_kit/shared/exceptions, src/mongo_kit/shared/logging
"""

from mongo_kit.shared.config import ConfigLoader, MongoConfig, load_mongo_config
from mongo_kit.shared.const import EntityFieldConst, SharedConst, UpdateOperatorConst
from mongo_kit.shared.exceptions import (
    BaseAppException,
    ConfigurationError,
    ConnectionFailedError,
    DocumentNotFoundError,
    ExceptionDetail,
)
from mongo_kit.shared.logging import (
    InMemoryLogger,
    InMemoryLogRepository,
    LogContext,
    LogLevel,
    LogRecord,
    Logger,
    LogRepository,
    create_default_logger,
)

__all__ = [
    "ConfigLoader",
    "MongoConfig",
    "load_mongo_config",
    "SharedConst",
    "EntityFieldConst",
    "UpdateOperatorConst",
    "BaseAppException",
    "ExceptionDetail",
    "ConfigurationError",
    "ConnectionFailedError",
    "DocumentNotFoundError",
    "LogContext",
    "LogLevel",
    "LogRecord",
    "Logger",
    "LogRepository",
    "InMemoryLogRepository",
    "InMemoryLogger",
    "create_default_logger",
]
