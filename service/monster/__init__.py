"""
몬스터 생성 서비스 모듈

스테이지 기반 몬스터 인카운터 생성을 담당합니다.
"""
from service.monster.monster_generator import (
    Encounter,
    get_grade,
    kills_required,
    monster_for_stage,
)

__all__ = ["Encounter", "get_grade", "kills_required", "monster_for_stage"]
