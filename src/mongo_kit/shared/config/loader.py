"""
목적: 설정 소스 병합 로더를 제공한다.
설명: dict/JSON 파일/dotenv 파일/환경 변수를 순서대로 병합하며, 나중에 추가한 소스가 우선한다.
디자인 패턴: 빌더 패턴
참조: src/mongo_kit/shared/config/mongo_config.py, src/mongo_kit/shared/const/__init__.py
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Mapping, Optional

from dotenv import dotenv_values

from mongo_kit.shared.const import SharedConst
from mongo_kit.shared.logging import Logger, create_default_logger


class ConfigLoader:
    """설정 로더 구현체이다.

    Args:
        logger: 주입 가능한 로거.
    """

    _DEFAULT_ENCODING = SharedConst.DEFAULT_ENCODING
    _DEFAULT_ENV_DELIMITER = SharedConst.ENV_NESTED_DELIMITER

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._logger = logger or create_default_logger("ConfigLoader")
        self._sources: list[Dict[str, Any]] = []

    def add_dict(self, data: Optional[Mapping[str, Any]]) -> "ConfigLoader":
        """딕셔너리 설정을 추가한다."""

        if data:
            self._sources.append(dict(data))
        return self

    def add_json_file(self, path: str, required: bool = False) -> "ConfigLoader":
        """JSON 파일 설정을 추가한다."""

        if not self._check_path(path, required):
            return self
        with open(path, "r", encoding=self._DEFAULT_ENCODING) as handle:
            try:
                payload = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError("JSON 설정 파일 파싱에 실패했습니다.") from exc
        if not isinstance(payload, dict):
            raise ValueError("JSON 설정 파일은 최상위가 객체여야 합니다.")
        self._sources.append(payload)
        return self

    def add_env_file(
        self,
        path: str,
        prefix: str = "",
        required: bool = False,
        parse_values: bool = True,
    ) -> "ConfigLoader":
        """dotenv 파일을 환경 변수와 같은 규칙으로 추가한다.

        프로세스 환경 변수를 변경하지 않는다.
        """

        if not self._check_path(path, required):
            return self
        values = {
            key: value
            for key, value in dotenv_values(path, encoding=self._DEFAULT_ENCODING).items()
            if value is not None
        }
        return self._add_prefixed(values, prefix, parse_values)

    def add_env(self, prefix: str = "", parse_values: bool = True) -> "ConfigLoader":
        """프로세스 환경 변수를 추가한다.

        Args:
            prefix: 이 접두사로 시작하는 키만 읽고, 접두사는 제거한다.
            parse_values: True면 bool/숫자/JSON 문자열을 해석한다.
                인증 정보처럼 문자열 그대로 보존해야 하는 값은 False로 읽는다.
        """

        return self._add_prefixed(os.environ, prefix, parse_values)

    def build(self, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """수집된 설정을 병합해 반환한다."""

        merged: Dict[str, Any] = {}
        for source in self._sources:
            merged = self._merge(merged, source)
        if overrides:
            merged = self._merge(merged, dict(overrides))
        return merged

    def _check_path(self, path: str, required: bool) -> bool:
        if not path:
            raise ValueError("path는 비어 있을 수 없습니다.")
        if os.path.exists(path):
            return True
        if required:
            raise FileNotFoundError(path)
        self._logger.warning(f"설정 파일이 없어 건너뜁니다: {path}")
        return False

    def _add_prefixed(
        self,
        values: Mapping[str, str],
        prefix: str,
        parse_values: bool,
    ) -> "ConfigLoader":
        data: Dict[str, Any] = {}
        for key, value in values.items():
            if prefix and not key.startswith(prefix):
                continue
            trimmed = key[len(prefix) :]
            parts = [part.lower() for part in trimmed.split(self._DEFAULT_ENV_DELIMITER) if part]
            if not parts:
                continue
            parsed = self._parse_value(value) if parse_values else value
            self._assign_nested(data, parts, parsed)
        if data:
            self._sources.append(data)
        return self

    def _assign_nested(self, root: Dict[str, Any], keys: list[str], value: Any) -> None:
        current = root
        for part in keys[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]
        current[keys[-1]] = value

    def _merge(self, base: Dict[str, Any], incoming: Dict[str, Any]) -> Dict[str, Any]:
        merged = dict(base)
        for key, value in incoming.items():
            if isinstance(merged.get(key), dict) and isinstance(value, dict):
                merged[key] = self._merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def _parse_value(self, raw: str) -> Any:
        """JSON 리터럴(bool/null/숫자/객체/배열)로 읽히면 해석하고, 아니면 문자열 그대로 둔다."""

        candidate = raw.strip()
        if candidate.lower() in {"true", "false", "null"}:
            candidate = candidate.lower()
        try:
            return json.loads(candidate)
        except json.JSONDecodeError:
            return raw
