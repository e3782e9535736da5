"""
목적: 공통 상수 집합을 제공한다.
설명: 설정 로딩, 연결 타임아웃, 엔티티 필드 이름 등 전역 상수 값을 정의한다.
디자인 패턴: 상수 객체
참조: src/mongo_kit/shared/config/loader.py, src/mongo_kit/integrations/db/base/models.py
"""


class SharedConst:
    """공통 상수 집합이다.

    Attributes:
        DEFAULT_ENCODING: 기본 파일 인코딩.
        ENV_NESTED_DELIMITER: 환경 변수 키를 중첩 경로로 해석하는 구분자.
        MONGO_ENV_PREFIX: MongoDB 설정 환경 변수 접두사.
        MONGO_DEFAULT_TIMEOUT_SECONDS: 연결/소켓/종료에 공통 적용되는 기본 타임아웃.
    """

    DEFAULT_ENCODING = "utf-8"
    ENV_NESTED_DELIMITER = "__"
    MONGO_ENV_PREFIX = "MGO_"
    MONGO_DEFAULT_TIMEOUT_SECONDS = 5.0


class EntityFieldConst:
    """엔티티 엔벨로프가 저장하는 필드 이름이다."""

    ID = "_id"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    DELETED_AT = "deleted_at"

    ALL = frozenset({ID, CREATED_AT, UPDATED_AT, DELETED_AT})


class UpdateOperatorConst:
    """업데이트 문서에서 사용하는 연산자 이름이다."""

    SET = "$set"
    UNSET = "$unset"
    INC = "$inc"


__all__ = ["SharedConst", "EntityFieldConst", "UpdateOperatorConst"]
