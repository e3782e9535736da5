"""
목적: 설정/연결/조회 단계의 도메인 예외를 정의한다.
설명: 저장소 작업 오류는 감싸지 않고 그대로 전파하며, 이 계층이 직접 판단하는 실패만 예외로 만든다.
디자인 패턴: 도메인 예외 객체
참조: src/mongo_kit/shared/exceptions/base.py
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from mongo_kit.shared.exceptions.base import BaseAppException, ExceptionDetail


class ConfigurationError(BaseAppException):
    """필수 설정 누락 또는 형식 오류."""

    CODE = "MGO-CONFIG"

    def __init__(
        self,
        message: str,
        missing: Iterable[str] = (),
        original: Optional[BaseException] = None,
    ) -> None:
        missing_keys = sorted(missing)
        detail = ExceptionDetail(
            code=self.CODE,
            cause=message,
            hint="MGO_ADDRS, MGO_NAME, MGO_AUTH_SOURCE, MGO_USER, MGO_PASSWORD 환경 변수를 확인하세요.",
            metadata={"missing": missing_keys} if missing_keys else {},
        )
        super().__init__(message=message, detail=detail, original=original)
        self.missing = missing_keys


class ConnectionFailedError(BaseAppException):
    """클라이언트 생성 또는 ping 실패."""

    CODE = "MGO-CONNECT"

    def __init__(
        self,
        message: str,
        hosts: Iterable[str] = (),
        original: Optional[BaseException] = None,
    ) -> None:
        detail = ExceptionDetail(
            code=self.CODE,
            cause=str(original) if original else message,
            hint="호스트 주소, 인증 정보, 네트워크 접근 여부를 확인하세요.",
            metadata={"hosts": list(hosts)},
        )
        super().__init__(message=message, detail=detail, original=original)


class DocumentNotFoundError(BaseAppException):
    """find_one 조건에 맞는 문서가 없을 때 발생한다."""

    CODE = "MGO-NOT-FOUND"

    def __init__(self, collection: str, filter_query: Dict[str, Any]) -> None:
        message = f"조건에 맞는 문서가 없습니다: {collection}"
        detail = ExceptionDetail(
            code=self.CODE,
            cause=message,
            metadata={"collection": collection, "filter": repr(filter_query)},
        )
        super().__init__(message=message, detail=detail)
        self.collection = collection
        self.filter = filter_query
