"""
목적: 외부 시스템 연동 패키지를 정의한다.
설명: 현재는 MongoDB 데이터 접근 계층(db)을 제공한다.
디자인 패턴: 퍼사드
참조: src/mongo_kit/integrations/db/__init__.py
"""
