"""
목적: 예외 모듈 공개 API를 제공한다.
설명: 외부에서 사용할 예외 모델, 베이스 클래스, 도메인 예외를 노출한다.
디자인 패턴: 퍼사드
참조: src/mongo_kit/shared/exceptions/base.py, src/mongo_kit/shared/exceptions/errors.py
"""

from mongo_kit.shared.exceptions.base import BaseAppException, ExceptionDetail
from mongo_kit.shared.exceptions.errors import (
    ConfigurationError,
    ConnectionFailedError,
    DocumentNotFoundError,
)

__all__ = [
    "BaseAppException",
    "ExceptionDetail",
    "ConfigurationError",
    "ConnectionFailedError",
    "DocumentNotFoundError",
]
