"""
목적: 로깅 레코드와 컨텍스트 모델을 정의한다.
설명: 컬렉션 작업 단위(데이터베이스/컬렉션/작업명) 컨텍스트와
    표준 출력용 JSON 변환을 포함한 로그 레코드를 Pydantic으로 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/mongo_kit/shared/logging/logger.py
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """로그 레벨. `severity`로 임계값을 비교한다."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    @classmethod
    def parse(cls, raw: Optional[str], default: "LogLevel") -> "LogLevel":
        """문자열을 레벨로 바꾼다. 알 수 없는 값이면 기본값을 쓴다."""

        if not raw:
            return default
        try:
            return cls(raw.strip().upper())
        except ValueError:
            return default


_SEVERITY = {
    LogLevel.DEBUG: 10,
    LogLevel.INFO: 20,
    LogLevel.WARNING: 30,
    LogLevel.ERROR: 40,
}


class LogContext(BaseModel):
    """컬렉션 작업 로그 컨텍스트.

    Args:
        database: 대상 데이터베이스 이름.
        collection: 대상 컬렉션 이름.
        operation: 수행 중인 컬렉션 작업 이름.
        tags: 자유형 태그.
    """

    database: Optional[str] = None
    collection: Optional[str] = None
    operation: Optional[str] = None
    tags: Dict[str, str] = Field(default_factory=dict)

    def merged_with(self, override: Optional["LogContext"]) -> "LogContext":
        """override에 값이 있는 필드만 덮어쓴 새 컨텍스트를 만든다. 태그는 합친다."""

        if override is None:
            return self
        return LogContext(
            database=override.database or self.database,
            collection=override.collection or self.collection,
            operation=override.operation or self.operation,
            tags={**self.tags, **override.tags},
        )


class LogRecord(BaseModel):
    """저장소에 쌓이는 로그 한 건."""

    level: LogLevel
    message: str
    logger_name: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    context: Optional[LogContext] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def to_json_payload(self) -> Dict[str, Any]:
        """표준 출력 한 줄에 쓸 dict를 만든다. 비어 있는 context/metadata는 뺀다."""

        payload: Dict[str, Any] = {
            "timestamp": self.timestamp.astimezone(timezone.utc).isoformat(),
            "level": self.level.value,
            "logger": self.logger_name,
            "message": self.message,
        }
        if self.context is not None:
            payload["context"] = self.context.model_dump(exclude_none=True)
        if self.metadata:
            payload["metadata"] = self.metadata
        return payload
