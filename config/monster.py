"""몬스터 생성 관련 설정"""
from dataclasses import dataclass
from enum import Enum

from exceptions import MonsterTemplateCorruptedError


class MonsterGrade(str, Enum):
    """몬스터 등급"""
    NORMAL = "Normal"
    ELITE = "Elite"
    BOSS = "Boss"


class MonsterRole(str, Enum):
    """그룹 내 몬스터 역할"""
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    BOSS = "boss"


REGULAR_ROLES = (MonsterRole.WEAK, MonsterRole.MEDIUM, MonsterRole.STRONG)
"""일반 몬스터가 진행도에 따라 순환하는 역할 순서"""


@dataclass(frozen=True)
class MonsterConfig:
    """몬스터 스케일링 설정"""

    STAGES_PER_GROUP: int = 5
    """같은 몬스터 그룹이 유지되는 스테이지 수"""

    ELITE_INTERVAL: int = 5
    """스테이지 내 N번째 처치마다 엘리트 등장"""

    STAT_GROWTH: float = 1.25
    """스테이지당 HP/공격력/골드 증가율"""

    NORMAL_MULTIPLIER: float = 1.0
    ELITE_MULTIPLIER: float = 3.0
    BOSS_MULTIPLIER: float = 10.0


@dataclass(frozen=True)
class MonsterTemplate:
    """몬스터 기본 스탯 (스테이지 1, Normal 기준)"""
    name: str
    hp: int
    attack: int
    gold: int
    attack_speed: float


# 그룹별 몬스터 테이블
MONSTER_GROUPS: list[dict[MonsterRole, MonsterTemplate]] = [
    # 숲의 생물
    {
        MonsterRole.WEAK: MonsterTemplate("슬라임", 10, 1, 2, 0.8),
        MonsterRole.MEDIUM: MonsterTemplate("고블린", 15, 2, 3, 1.0),
        MonsterRole.STRONG: MonsterTemplate("늑대", 20, 3, 5, 1.2),
        MonsterRole.BOSS: MonsterTemplate("오크 족장", 100, 1, 50, 0.5),
    },
    # 언데드
    {
        MonsterRole.WEAK: MonsterTemplate("해골 병사", 30, 2, 8, 1.0),
        MonsterRole.MEDIUM: MonsterTemplate("좀비", 40, 3, 10, 0.6),
        MonsterRole.STRONG: MonsterTemplate("구울", 50, 4, 12, 1.1),
        MonsterRole.BOSS: MonsterTemplate("리치", 250, 2, 120, 0.5),
    },
    # 악마
    {
        MonsterRole.WEAK: MonsterTemplate("임프", 60, 3, 15, 1.3),
        MonsterRole.MEDIUM: MonsterTemplate("악마 전사", 80, 5, 20, 0.9),
        MonsterRole.STRONG: MonsterTemplate("서큐버스", 100, 6, 25, 1.2),
        MonsterRole.BOSS: MonsterTemplate("악마 군주", 500, 3, 250, 0.5),
    },
]

FALLBACK_TEMPLATE = MONSTER_GROUPS[0][MonsterRole.WEAK]
"""테이블 손상 시 사용할 기본 템플릿"""


def get_monster_template(group_index: int, role: MonsterRole) -> MonsterTemplate:
    """
    그룹/역할로 몬스터 템플릿 조회

    Raises:
        MonsterTemplateCorruptedError: 테이블에 해당 항목이 없음
    """
    try:
        return MONSTER_GROUPS[group_index][role]
    except (IndexError, KeyError) as e:
        raise MonsterTemplateCorruptedError(group_index, role.value) from e


MONSTER = MonsterConfig()
