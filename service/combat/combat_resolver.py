"""
틱 기반 전투 해석기

캐릭터와 몬스터의 데미지 교환을 고정 길이 틱 단위로 시뮬레이션합니다.
틱을 누가 언제 호출하는지(타이머, 일괄 계산 등)는 호출자가 결정합니다.

한 틱의 순서:
1. 플레이어가 dps * tick_seconds 만큼 피해 → 몬스터 HP 0 이하면 승리 (동시 처치는 플레이어 우선)
2. 몬스터 공격 게이지가 attack_speed * tick_seconds 만큼 충전
   게이지 1.0마다 attack_power 피해 1회 → 캐릭터 HP 0 이하면 패배
"""
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, TYPE_CHECKING

from config import COMBAT
from service.monster.monster_generator import Encounter

if TYPE_CHECKING:
    from models.character import Character


class CombatState(str, Enum):
    """전투 상태"""
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class BattleState:
    """한 인카운터에 대한 전투 진행 상태"""

    encounter: Encounter
    character_hp: float
    attack_gauge: float = 0.0
    """몬스터 공격 게이지 (1.0 도달 시 공격)"""

    state: CombatState = CombatState.ACTIVE
    elapsed: float = 0.0
    """누적 전투 시간 (초)"""

    @property
    def is_finished(self) -> bool:
        return self.state != CombatState.ACTIVE


@dataclass(frozen=True)
class TickResult:
    """틱 처리 결과"""
    state: CombatState
    battle: BattleState
    damage_dealt: float = 0.0
    hits_taken: int = 0
    damage_taken: int = 0
    hits_evaded: int = 0


def start_battle(character: "Character", encounter: Encounter) -> BattleState:
    """HP가 가득 찬 캐릭터로 새 전투 시작"""
    return BattleState(encounter=encounter, character_hp=float(character.max_hp))


def resolve_combat_tick(
    character: "Character",
    battle: BattleState,
    tick_seconds: float,
    rng: Optional[random.Random] = None,
) -> TickResult:
    """
    전투 1틱 처리

    입력 상태는 변경하지 않고 새 BattleState를 반환합니다.

    Args:
        character: 전투 중인 캐릭터 (dps, evasion_rate 사용)
        battle: 현재 전투 상태
        tick_seconds: 틱 길이 (초, 음수는 0으로 처리)
        rng: 회피 판정용 난수 생성기. None이면 회피 없이 결정적으로 계산

    Returns:
        TickResult
    """
    if battle.is_finished:
        return TickResult(state=battle.state, battle=battle)

    tick_seconds = max(0.0, tick_seconds)
    encounter = battle.encounter
    monster_hp = max(0.0, encounter.current_hp)
    character_hp = max(0.0, battle.character_hp)
    elapsed = battle.elapsed + tick_seconds

    # 이미 HP가 0인 입력은 평가 전에 정리
    if character_hp <= 0:
        lost = replace(battle, character_hp=0.0, state=CombatState.LOST)
        return TickResult(state=CombatState.LOST, battle=lost)

    # 1. 플레이어 공격
    damage_dealt = max(0.0, character.dps) * tick_seconds
    monster_hp = max(0.0, monster_hp - damage_dealt)
    if monster_hp <= 0:
        won = replace(
            battle,
            encounter=replace(encounter, current_hp=0),
            character_hp=character_hp,
            state=CombatState.WON,
            elapsed=elapsed,
        )
        return TickResult(state=CombatState.WON, battle=won, damage_dealt=damage_dealt)

    # 2. 몬스터 공격
    gauge = max(0.0, battle.attack_gauge) + max(0.0, encounter.attack_speed) * tick_seconds
    hits = 0
    evaded = 0
    damage_taken = 0
    while gauge >= COMBAT.ATTACK_GAUGE_THRESHOLD and character_hp > 0:
        gauge -= COMBAT.ATTACK_GAUGE_THRESHOLD
        if rng is not None and rng.random() < character.evasion_rate:
            evaded += 1
            continue
        hits += 1
        damage_taken += encounter.attack_power
        character_hp = max(0.0, character_hp - encounter.attack_power)

    state = CombatState.LOST if character_hp <= 0 else CombatState.ACTIVE
    next_battle = replace(
        battle,
        encounter=replace(encounter, current_hp=monster_hp),
        character_hp=character_hp,
        attack_gauge=gauge,
        state=state,
        elapsed=elapsed,
    )
    return TickResult(
        state=state,
        battle=next_battle,
        damage_dealt=damage_dealt,
        hits_taken=hits,
        damage_taken=damage_taken,
        hits_evaded=evaded,
    )


def simulate_battle(
    character: "Character",
    battle: BattleState,
    tick_seconds: float = COMBAT.TICK_SECONDS,
    max_ticks: int = COMBAT.MAX_CATCH_UP_TICKS,
    rng: Optional[random.Random] = None,
) -> BattleState:
    """
    전투가 끝나거나 max_ticks에 도달할 때까지 틱을 반복 (일괄 계산)

    Returns:
        마지막 BattleState (max_ticks 도달 시 ACTIVE일 수 있음)
    """
    for _ in range(max(0, max_ticks)):
        if battle.is_finished:
            break
        battle = resolve_combat_tick(character, battle, tick_seconds, rng).battle
    return battle
