"""
목적: 로거 인터페이스와 인메모리 구현체를 제공한다.
설명: 레코드는 크기 제한이 있는 인메모리 저장소에 쌓이고, LOG_STDOUT이 켜져 있으면
    JSON 한 줄로 표준 출력에도 쓴다. LOG_LEVEL보다 낮은 레벨은 기록하지 않는다.
디자인 패턴: 전략 패턴, 저장소 패턴
참조: src/mongo_kit/shared/logging/models.py
"""

from __future__ import annotations

import json
import os
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Dict, List, Optional

from mongo_kit.shared.logging.models import LogContext, LogLevel, LogRecord

_TRUTHY = {"1", "true", "yes", "on"}
DEFAULT_MAX_RECORDS = 1000


class LogRepository(ABC):
    """로그 저장소 인터페이스."""

    @abstractmethod
    def add(self, record: LogRecord) -> None:
        """레코드 한 건을 저장한다."""

    @abstractmethod
    def list(self) -> List[LogRecord]:
        """저장 순서대로 레코드 사본 목록을 반환한다."""

    @abstractmethod
    def clear(self) -> None:
        """저장된 레코드를 비운다."""


class InMemoryLogRepository(LogRepository):
    """최근 레코드만 보관하는 인메모리 저장소.

    Args:
        max_records: 보관할 최대 건수. None이면 제한하지 않는다.
    """

    def __init__(self, max_records: Optional[int] = DEFAULT_MAX_RECORDS) -> None:
        self._records: Deque[LogRecord] = deque(maxlen=max_records)

    def add(self, record: LogRecord) -> None:
        self._records.append(record)

    def list(self) -> List[LogRecord]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()


class Logger(ABC):
    """로거 인터페이스. 레벨별 메서드는 모두 `log`로 모인다."""

    @abstractmethod
    def log(
        self,
        level: LogLevel,
        message: str,
        context: Optional[LogContext] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """레코드를 남긴다."""

    @abstractmethod
    def with_context(self, context: LogContext) -> "Logger":
        """기본 컨텍스트를 합친 자식 로거를 만든다. 저장소는 공유한다."""

    def debug(self, message: str, context: Optional[LogContext] = None, metadata: Optional[Dict[str, Any]] = None) -> None:
        self.log(LogLevel.DEBUG, message, context, metadata)

    def info(self, message: str, context: Optional[LogContext] = None, metadata: Optional[Dict[str, Any]] = None) -> None:
        self.log(LogLevel.INFO, message, context, metadata)

    def warning(self, message: str, context: Optional[LogContext] = None, metadata: Optional[Dict[str, Any]] = None) -> None:
        self.log(LogLevel.WARNING, message, context, metadata)

    def error(self, message: str, context: Optional[LogContext] = None, metadata: Optional[Dict[str, Any]] = None) -> None:
        self.log(LogLevel.ERROR, message, context, metadata)


class InMemoryLogger(Logger):
    """인메모리 저장소에 기록하는 로거.

    Args:
        name: 로거 이름.
        repository: 레코드 저장소. 없으면 새로 만든다.
        base_context: 모든 레코드에 합쳐질 기본 컨텍스트.
        emit_stdout: 표준 출력 여부. None이면 LOG_STDOUT 환경 변수를 따른다.
        min_level: 기록할 최소 레벨. None이면 LOG_LEVEL 환경 변수(기본 DEBUG)를 따른다.
    """

    def __init__(
        self,
        name: str,
        repository: Optional[LogRepository] = None,
        base_context: Optional[LogContext] = None,
        emit_stdout: Optional[bool] = None,
        min_level: Optional[LogLevel] = None,
    ) -> None:
        self._name = name
        self._repository = repository or InMemoryLogRepository()
        self._base_context = base_context
        if emit_stdout is None:
            emit_stdout = os.getenv("LOG_STDOUT", "").strip().lower() in _TRUTHY
        self._emit_stdout = emit_stdout
        self._min_level = min_level or LogLevel.parse(os.getenv("LOG_LEVEL"), LogLevel.DEBUG)

    @property
    def name(self) -> str:
        return self._name

    @property
    def repository(self) -> LogRepository:
        return self._repository

    @property
    def min_level(self) -> LogLevel:
        return self._min_level

    def log(
        self,
        level: LogLevel,
        message: str,
        context: Optional[LogContext] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        if level.severity < self._min_level.severity:
            return
        if self._base_context is None:
            merged = context
        else:
            merged = self._base_context.merged_with(context)
        record = LogRecord(
            level=level,
            message=message,
            logger_name=self._name,
            context=merged,
            metadata=metadata or {},
        )
        self._repository.add(record)
        if self._emit_stdout:
            print(json.dumps(record.to_json_payload(), ensure_ascii=False, default=str), flush=True)

    def with_context(self, context: LogContext) -> "InMemoryLogger":
        base = context if self._base_context is None else self._base_context.merged_with(context)
        return InMemoryLogger(
            name=self._name,
            repository=self._repository,
            base_context=base,
            emit_stdout=self._emit_stdout,
            min_level=self._min_level,
        )


def create_default_logger(name: str) -> InMemoryLogger:
    """환경 변수 설정을 따르는 기본 로거를 만든다."""

    return InMemoryLogger(name=name)
