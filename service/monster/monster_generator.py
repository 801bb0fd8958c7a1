"""
스테이지 몬스터 생성기

(스테이지, 처치 진행도)로부터 스케일링된 몬스터 인카운터를 결정적으로 생성합니다.

규칙:
- 스테이지 N은 일반 몬스터 N마리 처치 후 보스가 등장
- 스테이지 내 5번째 처치마다 엘리트 (진행도 % 5 == 4)
- 몬스터 그룹은 5스테이지마다 바뀌고 그룹 수만큼 순환
- HP/공격력/골드 = floor(기본값 * 1.25^(stage-1) * 등급 배율), 공격 속도는 고정
"""
import logging
import math
from dataclasses import dataclass

from config import (
    MONSTER,
    MONSTER_GROUPS,
    FALLBACK_TEMPLATE,
    REGULAR_ROLES,
    MonsterGrade,
    MonsterRole,
    MonsterTemplate,
    get_monster_template,
)
from exceptions import InvalidStageError, MonsterTemplateCorruptedError

logger = logging.getLogger(__name__)

GRADE_MULTIPLIERS: dict[MonsterGrade, float] = {
    MonsterGrade.NORMAL: MONSTER.NORMAL_MULTIPLIER,
    MonsterGrade.ELITE: MONSTER.ELITE_MULTIPLIER,
    MonsterGrade.BOSS: MONSTER.BOSS_MULTIPLIER,
}


@dataclass
class Encounter:
    """현재 전투 중인 몬스터 (DB에 저장하지 않음)"""

    name: str
    grade: MonsterGrade
    stage: int
    progress: int
    max_hp: int
    current_hp: float
    attack_power: int
    attack_speed: float
    gold_reward: int

    @property
    def is_boss(self) -> bool:
        return self.grade == MonsterGrade.BOSS

    @property
    def is_defeated(self) -> bool:
        return self.current_hp <= 0


def kills_required(stage: int) -> int:
    """보스 등장 전까지 처치해야 하는 일반 몬스터 수"""
    if stage < 1:
        raise InvalidStageError(stage)
    return stage


def get_group_index(stage: int) -> int:
    return ((stage - 1) // MONSTER.STAGES_PER_GROUP) % len(MONSTER_GROUPS)


def get_grade(stage: int, progress: int) -> MonsterGrade:
    """진행도에 따른 몬스터 등급"""
    if progress >= kills_required(stage):
        return MonsterGrade.BOSS
    if progress % MONSTER.ELITE_INTERVAL == MONSTER.ELITE_INTERVAL - 1:
        return MonsterGrade.ELITE
    return MonsterGrade.NORMAL


def _select_role(grade: MonsterGrade, progress: int) -> MonsterRole:
    if grade == MonsterGrade.BOSS:
        return MonsterRole.BOSS
    if grade == MonsterGrade.ELITE:
        return MonsterRole.STRONG
    return REGULAR_ROLES[progress % len(REGULAR_ROLES)]


def _resolve_template(group_index: int, role: MonsterRole) -> MonsterTemplate:
    try:
        return get_monster_template(group_index, role)
    except MonsterTemplateCorruptedError as e:
        # 테이블이 깨져도 전투는 계속되어야 한다
        logger.error(f"{e.message} - fallback to {FALLBACK_TEMPLATE.name}")
        return FALLBACK_TEMPLATE


def _scale(base: float, stage: int, multiplier: float) -> int:
    return math.floor(base * MONSTER.STAT_GROWTH ** (stage - 1) * multiplier)


def monster_for_stage(stage: int, progress: int) -> Encounter:
    """
    스테이지/진행도에 해당하는 몬스터 생성

    Args:
        stage: 현재 스테이지 (1 이상)
        progress: 현재 스테이지의 처치 수 (0 이상)

    Returns:
        HP가 가득 찬 새 인카운터

    Raises:
        InvalidStageError: stage < 1 또는 progress < 0
    """
    if stage < 1:
        raise InvalidStageError(stage)
    if progress < 0:
        raise InvalidStageError(stage, progress)

    grade = get_grade(stage, progress)
    template = _resolve_template(get_group_index(stage), _select_role(grade, progress))
    multiplier = GRADE_MULTIPLIERS[grade]

    hp = _scale(template.hp, stage, multiplier)
    return Encounter(
        name=f"{grade.value} {template.name}",
        grade=grade,
        stage=stage,
        progress=progress,
        max_hp=hp,
        current_hp=hp,
        attack_power=_scale(template.attack, stage, multiplier),
        attack_speed=template.attack_speed,
        gold_reward=_scale(template.gold, stage, multiplier),
    )
