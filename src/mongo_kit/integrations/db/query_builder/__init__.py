"""
목적: DB 쿼리 빌더 모듈 공개 API를 제공한다.
설명: 컬렉션 옵션 DSL 빌더를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/mongo_kit/integrations/db/query_builder/option_builder.py
"""

from .option_builder import OptionBuilder

__all__ = ["OptionBuilder"]
