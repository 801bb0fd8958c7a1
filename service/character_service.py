"""
CharacterService

캐릭터 조회/강화/전투 결과 반영을 담당합니다.
모든 변경은 캐릭터별 락 안에서 조회 → 계산 → 저장 순서로 실행되어
동시에 들어온 요청(연타, 전투와 강화 겹침 등)이 서로의 결과를 덮어쓰지 않습니다.
"""
import logging
import random
from dataclasses import dataclass
from typing import Optional, Union

from config import COMBAT
from models.character import Character
from models.repos.character_repo import get_or_create_character, save_character
from service.combat.combat_resolver import BattleState, CombatState, simulate_battle, start_battle
from service.progression.progression_service import (
    DefeatResult,
    UpgradeResult,
    VictoryResult,
    current_encounter,
    parse_upgrade_stat,
    resolve_defeat,
    resolve_victory,
    upgrade,
)
from service.session import character_lock

logger = logging.getLogger(__name__)


@dataclass
class FightResult:
    """일괄 전투 결과"""
    battle: BattleState
    outcome: Optional[Union[VictoryResult, DefeatResult]]
    """시간 내에 끝나지 않았으면 None"""

    @property
    def state(self) -> CombatState:
        return self.battle.state


class CharacterService:
    """캐릭터 관련 비즈니스 로직"""

    @staticmethod
    async def get_character(user_id: str) -> Character:
        """캐릭터 조회 (첫 접속이면 생성)"""
        async with character_lock(user_id):
            return await get_or_create_character(user_id)

    @staticmethod
    async def upgrade_stat(user_id: str, stat_name) -> UpgradeResult:
        """
        스탯 강화

        Args:
            user_id: 대상 사용자
            stat_name: "strength" 또는 "dexterity"

        Returns:
            강화 결과 (골드 부족 시 outcome=INSUFFICIENT_GOLD, 저장 안 함)

        Raises:
            InvalidStatError: 강화할 수 없는 스탯
        """
        stat = parse_upgrade_stat(stat_name)
        async with character_lock(user_id):
            character = await get_or_create_character(user_id)
            result = upgrade(character, stat)
            if result.success:
                await save_character(character)
            return result

    @staticmethod
    async def win_battle(user_id: str) -> VictoryResult:
        """현재 몬스터 처치 반영"""
        async with character_lock(user_id):
            character = await get_or_create_character(user_id)
            result = resolve_victory(character)
            await save_character(character)
            return result

    @staticmethod
    async def lose_battle(user_id: str) -> DefeatResult:
        """패배 패널티 반영"""
        async with character_lock(user_id):
            character = await get_or_create_character(user_id)
            result = resolve_defeat(character)
            await save_character(character)
            return result

    @staticmethod
    async def fight_current_monster(
        user_id: str,
        tick_seconds: float = COMBAT.TICK_SECONDS,
        max_ticks: int = COMBAT.MAX_CATCH_UP_TICKS,
        rng: Optional[random.Random] = None,
    ) -> FightResult:
        """
        현재 몬스터와 결판이 날 때까지 일괄 계산 후 결과 반영

        Args:
            rng: 회피 판정용 난수 생성기 (없으면 새로 생성)

        Returns:
            FightResult (max_ticks 안에 끝나지 않으면 outcome=None, 변경 없음)
        """
        if rng is None:
            rng = random.Random()
        async with character_lock(user_id):
            character = await get_or_create_character(user_id)
            battle = start_battle(character, current_encounter(character))
            battle = simulate_battle(character, battle, tick_seconds, max_ticks, rng)

            outcome = None
            if battle.state == CombatState.WON:
                outcome = resolve_victory(character)
            elif battle.state == CombatState.LOST:
                outcome = resolve_defeat(character)

            if outcome is not None:
                await save_character(character)
            else:
                logger.info(f"Fight timed out: user={user_id}, elapsed={battle.elapsed:.1f}s")

            return FightResult(battle=battle, outcome=outcome)
