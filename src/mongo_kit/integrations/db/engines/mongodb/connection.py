"""
목적: MongoDB 연결 관리 모듈을 제공한다.
설명: 설정으로 클라이언트를 만들고 ping으로 연결을 확인한 뒤 데이터베이스 핸들을 보관한다.
    종료는 최선 노력으로 수행하며 실패해도 예외를 올리지 않는다.
디자인 패턴: 매니저 패턴
참조: src/mongo_kit/integrations/db/client.py, src/mongo_kit/shared/config/mongo_config.py
"""

from __future__ import annotations

from typing import Any, Optional

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from mongo_kit.shared.config import MongoConfig
from mongo_kit.shared.exceptions import ConnectionFailedError
from mongo_kit.shared.logging import LogContext, Logger, create_default_logger


class MongoConnectionManager:
    """MongoDB 연결 관리자."""

    def __init__(
        self,
        config: MongoConfig,
        logger: Optional[Logger] = None,
        mongo_client_cls: Any = MongoClient,
    ) -> None:
        self._config = config
        self._logger = (logger or create_default_logger("MongoConnection")).with_context(
            LogContext(database=config.name)
        )
        self._mongo_client_cls = mongo_client_cls
        self._client: Any | None = None
        self._database: Database | None = None

    @property
    def config(self) -> MongoConfig:
        return self._config

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    def connect(self) -> None:
        """클라이언트를 만들고 ping으로 도달 가능 여부를 확인한다.

        이미 연결되어 있으면 아무 것도 하지 않는다.

        Raises:
            ConnectionFailedError: 클라이언트 생성 또는 ping이 실패한 경우.
        """

        if self._client is not None:
            return
        config = self._config
        timeout_ms = config.timeout_ms
        try:
            client = self._mongo_client_cls(
                host=config.hosts,
                authSource=config.auth_source,
                username=config.user,
                password=config.password.get_secret_value(),
                connectTimeoutMS=timeout_ms,
                socketTimeoutMS=timeout_ms,
                serverSelectionTimeoutMS=timeout_ms,
                tz_aware=True,
            )
        except PyMongoError as exc:
            self._logger.error(
                "MongoDB 클라이언트 생성에 실패했습니다.",
                metadata={"hosts": config.hosts, "error": str(exc)},
            )
            raise ConnectionFailedError(
                "MongoDB 클라이언트 생성에 실패했습니다.",
                hosts=config.hosts,
                original=exc,
            ) from exc

        try:
            client.admin.command("ping")
        except PyMongoError as exc:
            self._logger.error(
                "MongoDB ping에 실패했습니다.",
                metadata={"hosts": config.hosts, "error": str(exc)},
            )
            self._close_quietly(client)
            raise ConnectionFailedError(
                "MongoDB 서버에 연결할 수 없습니다.",
                hosts=config.hosts,
                original=exc,
            ) from exc

        self._client = client
        self._database = client[config.name]
        self._logger.info(
            "MongoDB 연결이 초기화되었습니다.",
            metadata={"hosts": config.hosts},
        )

    def close(self) -> None:
        """MongoDB 연결을 종료한다. 종료 중 오류는 경고 로그만 남긴다."""

        if self._client is None:
            return
        client = self._client
        self._client = None
        self._database = None
        self._close_quietly(client)
        self._logger.info("MongoDB 연결이 종료되었습니다.")

    @property
    def database(self) -> Database:
        """초기화된 MongoDB 데이터베이스 핸들을 반환한다."""

        if self._database is None:
            raise RuntimeError("MongoDB 연결이 초기화되지 않았습니다.")
        return self._database

    def _close_quietly(self, client: Any) -> None:
        try:
            client.close()
        except PyMongoError as exc:
            self._logger.warning(
                "MongoDB 연결 종료 중 오류가 발생했습니다.",
                metadata={"error": str(exc)},
            )
