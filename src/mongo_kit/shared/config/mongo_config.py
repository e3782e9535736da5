"""
목적: 환경 변수 기반 MongoDB 연결 설정을 제공한다.
설명: `MGO_` 접두사 환경 변수(및 선택적 dotenv 파일)를 읽어 설정 레코드를 만들고,
    필수 값이 없으면 네트워크 접근 전에 즉시 실패한다.
디자인 패턴: 설정 객체, 팩토리 함수
참조: src/mongo_kit/shared/config/loader.py, src/mongo_kit/integrations/db/engines/mongodb/connection.py
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    ValidationError,
    field_validator,
)

from mongo_kit.shared.config.loader import ConfigLoader
from mongo_kit.shared.const import SharedConst
from mongo_kit.shared.exceptions import ConfigurationError
from mongo_kit.shared.logging import Logger, create_default_logger

_REQUIRED_KEYS = ("addrs", "name", "auth_source", "user", "password")


class MongoConfig(BaseModel):
    """MongoDB 연결 설정 레코드이다.

    Args:
        addrs: 쉼표로 구분한 `host:port` 목록.
        name: 핸들에서 선택할 데이터베이스 이름.
        auth_source: 인증 데이터베이스 이름.
        user: 인증 사용자.
        password: 인증 비밀번호.
        timeout_seconds: 연결/소켓/서버 선택에 공통 적용할 타임아웃(초).
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    addrs: str = Field(min_length=1)
    name: str = Field(min_length=1)
    auth_source: str = Field(min_length=1)
    user: str = Field(min_length=1)
    password: SecretStr
    timeout_seconds: float = Field(
        default=SharedConst.MONGO_DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        validation_alias=AliasChoices("timeout_seconds", "timeout"),
    )

    @field_validator("addrs")
    @classmethod
    def _validate_addrs(cls, value: str) -> str:
        if not _split_hosts(value):
            raise ValueError("addrs에 최소 한 개의 host:port가 필요합니다.")
        return value

    @property
    def hosts(self) -> List[str]:
        """드라이버 host 목록 파라미터로 쓸 주소 목록을 반환한다."""

        return _split_hosts(self.addrs)

    @property
    def timeout_ms(self) -> int:
        return int(self.timeout_seconds * 1000)


def _split_hosts(addrs: str) -> List[str]:
    return [addr.strip() for addr in addrs.split(",") if addr.strip()]


def load_mongo_config(
    prefix: str = SharedConst.MONGO_ENV_PREFIX,
    env_file: Optional[str] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    logger: Optional[Logger] = None,
) -> MongoConfig:
    """환경 변수에서 MongoDB 설정을 읽는다.

    우선순위는 dotenv 파일 < 프로세스 환경 변수 < overrides 이다.

    Args:
        prefix: 환경 변수 접두사.
        env_file: 선택적 dotenv 파일 경로. 없으면 건너뛴다.
        overrides: 명시적으로 덮어쓸 값(접두사 없는 소문자 키).
        logger: 주입 가능한 로거.

    Raises:
        ConfigurationError: 필수 키가 없거나 값 형식이 올바르지 않은 경우.
    """

    logger = logger or create_default_logger("MongoConfig")
    loader = ConfigLoader(logger=logger)
    if env_file:
        loader.add_env_file(env_file, prefix=prefix, parse_values=False)
    loader.add_env(prefix=prefix, parse_values=False)
    data = loader.build(overrides)

    missing = [
        f"{prefix}{key.upper()}"
        for key in _REQUIRED_KEYS
        if not str(data.get(key) or "").strip()
    ]
    if missing:
        raise ConfigurationError(
            f"필수 MongoDB 설정이 없습니다: {', '.join(missing)}",
            missing=missing,
        )
    try:
        config = MongoConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError("MongoDB 설정 형식이 올바르지 않습니다.", original=exc) from exc

    logger.info(
        f"MongoDB 설정 로드 완료: hosts={config.hosts}, database={config.name}",
    )
    return config
