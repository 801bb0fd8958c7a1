"""
IdleRPG 게임 설정 상수

모든 매직 넘버와 게임 밸런스 관련 상수를 여기서 관리합니다.
각 도메인별 설정은 config/ 하위 모듈에 정의되어 있습니다.
"""
from config.character import CharacterConfig, CHARACTER, UpgradeConfig, UPGRADE
from config.combat import CombatConfig, COMBAT, ProgressionConfig, PROGRESSION
from config.monster import (
    MonsterGrade, MonsterRole, REGULAR_ROLES,
    MonsterConfig, MONSTER,
    MonsterTemplate, MONSTER_GROUPS, FALLBACK_TEMPLATE,
    get_monster_template,
)

__all__ = [
    # character
    "CharacterConfig", "CHARACTER",
    "UpgradeConfig", "UPGRADE",
    # combat & progression
    "CombatConfig", "COMBAT",
    "ProgressionConfig", "PROGRESSION",
    # monster
    "MonsterGrade", "MonsterRole", "REGULAR_ROLES",
    "MonsterConfig", "MONSTER",
    "MonsterTemplate", "MONSTER_GROUPS", "FALLBACK_TEMPLATE",
    "get_monster_template",
]
