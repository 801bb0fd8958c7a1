"""
진행도 컨트롤러

전투 결과와 강화 요청을 캐릭터 상태 변화로 반영합니다.
모든 함수는 메모리 상의 캐릭터만 변경하며, 저장은 호출자가 담당합니다.
호출자는 캐릭터별로 한 번에 하나의 연산만 실행되도록 직렬화해야 합니다.
"""
import logging
import math
from dataclasses import dataclass
from enum import Enum

from config import PROGRESSION
from exceptions import InvalidStatError
from models.character import Character, UpgradeStat
from service.monster.monster_generator import Encounter, kills_required, monster_for_stage
from service.player.stat_model import apply_derived_stats, upgrade_cost

logger = logging.getLogger(__name__)


class UpgradeOutcome(str, Enum):
    """강화 결과"""
    SUCCESS = "success"
    INSUFFICIENT_GOLD = "insufficient_gold"


@dataclass
class VictoryResult:
    """승리 처리 결과"""
    character: Character
    encounter: Encounter
    """다음 몬스터"""
    gold_earned: int
    stage_cleared: bool


@dataclass
class DefeatResult:
    """패배 처리 결과"""
    character: Character
    encounter: Encounter
    """후퇴한 스테이지의 몬스터"""
    gold_lost: int
    stage_lost: bool


@dataclass
class UpgradeResult:
    """강화 처리 결과"""
    character: Character
    stat: UpgradeStat
    cost: int
    outcome: UpgradeOutcome

    @property
    def success(self) -> bool:
        return self.outcome == UpgradeOutcome.SUCCESS

    @property
    def shortage(self) -> int:
        """부족한 골드 (성공 시 0)"""
        return 0 if self.success else self.cost - self.character.gold


def current_encounter(character: Character) -> Encounter:
    """캐릭터의 현재 진행도에 해당하는 몬스터"""
    return monster_for_stage(character.current_stage, character.stage_progress)


def resolve_victory(character: Character) -> VictoryResult:
    """
    현재 몬스터 처치 반영

    - 처치한 몬스터의 골드 지급
    - 보스였으면 다음 스테이지로, 아니면 진행도 +1
    """
    defeated = current_encounter(character)
    character.gold += defeated.gold_reward

    stage_cleared = character.stage_progress >= kills_required(character.current_stage)
    if stage_cleared:
        character.current_stage += 1
        character.stage_progress = 0
    else:
        character.stage_progress += 1

    logger.info(
        f"Victory: user={character.user_id}, monster={defeated.name}, "
        f"gold=+{defeated.gold_reward} (total: {character.gold}), "
        f"stage={character.current_stage}, progress={character.stage_progress}"
    )

    return VictoryResult(
        character=character,
        encounter=current_encounter(character),
        gold_earned=defeated.gold_reward,
        stage_cleared=stage_cleared,
    )


def resolve_defeat(character: Character) -> DefeatResult:
    """
    패배 패널티 반영

    - 스테이지 1 후퇴 (최소 1), 진행도 초기화
    - 골드 10% 손실
    """
    old_stage = character.current_stage
    old_gold = character.gold

    character.current_stage = max(PROGRESSION.MIN_STAGE, old_stage - PROGRESSION.DEFEAT_STAGE_PENALTY)
    character.stage_progress = 0
    character.gold = max(0, math.floor(old_gold * PROGRESSION.DEFEAT_GOLD_RATIO))

    logger.info(
        f"Defeat: user={character.user_id}, stage {old_stage} -> {character.current_stage}, "
        f"gold {old_gold} -> {character.gold}"
    )

    return DefeatResult(
        character=character,
        encounter=current_encounter(character),
        gold_lost=old_gold - character.gold,
        stage_lost=character.current_stage < old_stage,
    )


def parse_upgrade_stat(stat_name) -> UpgradeStat:
    """
    요청된 스탯 이름 검증

    Raises:
        InvalidStatError: strength/dexterity 이외의 값
    """
    if isinstance(stat_name, UpgradeStat):
        return stat_name
    try:
        return UpgradeStat(stat_name)
    except ValueError:
        raise InvalidStatError(str(stat_name)) from None


def upgrade(character: Character, stat_name) -> UpgradeResult:
    """
    기본 능력치 1 강화

    골드가 부족하면 캐릭터를 변경하지 않고 INSUFFICIENT_GOLD 결과를 반환합니다.

    Raises:
        InvalidStatError: 강화할 수 없는 스탯
        InvalidLevelError: 저장된 스탯 레벨이 1 미만
    """
    stat = parse_upgrade_stat(stat_name)
    cost = upgrade_cost(character.get_level(stat))

    if character.gold < cost:
        logger.debug(
            f"Upgrade rejected: user={character.user_id}, stat={stat.value}, "
            f"cost={cost}, gold={character.gold}"
        )
        return UpgradeResult(character, stat, cost, UpgradeOutcome.INSUFFICIENT_GOLD)

    character.gold -= cost
    setattr(character, stat.value, character.get_level(stat) + 1)
    apply_derived_stats(character)

    logger.info(
        f"Upgrade: user={character.user_id}, {stat.value}={character.get_level(stat)}, "
        f"cost={cost}, gold={character.gold}"
    )

    return UpgradeResult(character, stat, cost, UpgradeOutcome.SUCCESS)
