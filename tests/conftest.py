"""
목적: 테스트 공통 환경과 로깅 훅을 제공한다.
설명: 프로젝트 루트의 .env가 있으면 로딩하고, 세션/테스트 단위 진행 상황을 로깅한다.
디자인 패턴: 테스트 픽스처 + 테스트 훅
참조: pyproject.toml, .env.sample
"""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv


_LOGGER = logging.getLogger("tests")
_PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _load_env_files() -> None:
    """환경 변수 파일을 로딩한다. 없으면 라이브 DB 테스트만 스킵된다."""

    env_path = _PROJECT_ROOT / ".env"
    if not env_path.exists():
        _LOGGER.info(".env 파일이 없어 환경 변수만 사용합니다.")
        return
    load_dotenv(env_path, override=False)


_load_env_files()


def pytest_sessionstart(session) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 시작을 로깅한다."""

    _LOGGER.info("테스트 세션 시작")


def pytest_sessionfinish(session, exitstatus: int) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 종료를 로깅한다."""

    _LOGGER.info("테스트 세션 종료 (exitstatus=%s)", exitstatus)


def pytest_runtest_logstart(nodeid: str, location) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    _LOGGER.info("테스트 시작: %s", nodeid)


def pytest_runtest_logreport(report) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 결과를 로깅한다."""

    if report.when != "call":
        return
    if report.passed:
        _LOGGER.info("테스트 완료: %s", report.nodeid)
        return
    if report.skipped:
        _LOGGER.warning("테스트 스킵: %s", report.nodeid)
        return
    _LOGGER.error("테스트 실패: %s", report.nodeid)
