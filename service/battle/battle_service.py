"""
자동 전투 세션 서비스

배경 루프가 일정 주기마다 advance_all_sessions를 호출하면
각 세션의 전투를 경과 시간만큼 틱 단위로 진행하고, 승패를 캐릭터에 반영합니다.
"""
import logging
import math
import random
from dataclasses import dataclass, field
from typing import Optional

from config import COMBAT
from exceptions import SessionLimitError
from models.repos.character_repo import get_or_create_character, save_character
from service.combat.combat_resolver import BattleState, CombatState, resolve_combat_tick, start_battle
from service.progression.progression_service import current_encounter, resolve_defeat, resolve_victory
from service.session import (
    BattleSession,
    SessionType,
    active_sessions,
    create_session,
    end_session,
    character_lock,
    get_session,
)

logger = logging.getLogger(__name__)


@dataclass
class AdvanceReport:
    """세션 1회 진행 결과"""
    user_id: str
    ticks: int = 0
    kills: int = 0
    deaths: int = 0
    gold_earned: int = 0
    stages_cleared: int = 0
    events: list[str] = field(default_factory=list)


class BattleService:
    """자동 전투 세션 관리"""

    @staticmethod
    async def start_session(user_id: str, rng: Optional[random.Random] = None) -> BattleSession:
        """
        자동 전투 시작 (이미 진행 중이면 기존 세션 반환)

        Args:
            rng: 회피 판정용 난수 생성기 (없으면 세션마다 새로 생성)

        Raises:
            SessionLimitError: 동시 세션 수 초과
        """
        session = get_session(user_id)
        if session is not None:
            return session
        if len(active_sessions) >= COMBAT.MAX_ACTIVE_SESSIONS:
            raise SessionLimitError(COMBAT.MAX_ACTIVE_SESSIONS)

        async with character_lock(user_id):
            character = await get_or_create_character(user_id)

            # 캐릭터를 불러오는 동안 다른 요청이 세션을 만들었을 수 있다
            session = get_session(user_id)
            if session is not None:
                return session
            if len(active_sessions) >= COMBAT.MAX_ACTIVE_SESSIONS:
                raise SessionLimitError(COMBAT.MAX_ACTIVE_SESSIONS)

            session = create_session(user_id, rng)
            session.battle = start_battle(character, current_encounter(character))
            session.status = SessionType.FIGHT
        return session

    @staticmethod
    def stop_session(user_id: str) -> Optional[BattleSession]:
        """자동 전투 중지"""
        return end_session(user_id)

    @staticmethod
    async def advance_session(
        session: BattleSession,
        elapsed: float,
        tick_seconds: float = COMBAT.TICK_SECONDS,
        rng: Optional[random.Random] = None,
    ) -> AdvanceReport:
        """
        경과 시간만큼 세션의 전투 진행

        승리/패배는 즉시 캐릭터에 반영하고 다음 몬스터와 전투를 이어갑니다.
        일반 몬스터 처치 후에는 남은 HP를 유지하고, 스테이지 클리어/패배 시에는 HP를 회복합니다.
        틱 하나에 못 미치는 남은 시간은 세션에 쌓아 다음 진행에 더합니다.
        rng를 넘기지 않으면 세션의 난수 생성기로 회피를 판정합니다.
        """
        report = AdvanceReport(user_id=session.user_id)
        if session.ended or session.battle is None or tick_seconds <= 0:
            return report

        total = max(0.0, elapsed) + session.elapsed_remainder
        ticks = max(0, math.floor(total / tick_seconds + 1e-9))
        session.elapsed_remainder = max(0.0, total - ticks * tick_seconds)
        if ticks == 0:
            return report
        if rng is None:
            rng = session.rng

        async with character_lock(session.user_id):
            character = await get_or_create_character(session.user_id)
            battle = session.battle
            changed = False

            # 다른 경로(일괄 전투 등)로 진행도가 바뀌었으면 몬스터를 다시 생성
            if (battle.encounter.stage, battle.encounter.progress) != (character.current_stage, character.stage_progress):
                battle = start_battle(character, current_encounter(character))

            for _ in range(ticks):
                result = resolve_combat_tick(character, battle, tick_seconds, rng)
                battle = result.battle
                report.ticks += 1

                if result.state == CombatState.WON:
                    victory = resolve_victory(character)
                    changed = True
                    report.kills += 1
                    report.gold_earned += victory.gold_earned
                    report.events.append(f"{battle.encounter.name} 처치! (+{victory.gold_earned} 골드)")
                    if victory.stage_cleared:
                        report.stages_cleared += 1
                        report.events.append(f"스테이지 {character.current_stage - 1} 클리어!")
                        battle = start_battle(character, victory.encounter)
                    else:
                        battle = BattleState(
                            encounter=victory.encounter,
                            character_hp=min(battle.character_hp, character.max_hp),
                        )
                elif result.state == CombatState.LOST:
                    defeat = resolve_defeat(character)
                    changed = True
                    report.deaths += 1
                    report.events.append(
                        f"{battle.encounter.name}에게 패배... 스테이지 {character.current_stage}(으)로 후퇴 "
                        f"(-{defeat.gold_lost} 골드)"
                    )
                    battle = start_battle(character, defeat.encounter)

            if changed:
                await save_character(character)

        session.battle = battle
        session.kills += report.kills
        session.deaths += report.deaths
        session.gold_earned += report.gold_earned
        if report.events:
            session.last_event = report.events[-1]
        return report

    @staticmethod
    async def advance_all_sessions(
        elapsed: float,
        tick_seconds: float = COMBAT.TICK_SECONDS,
    ) -> list[AdvanceReport]:
        """진행 중인 모든 세션을 경과 시간만큼 진행"""
        reports = []
        for session in list(active_sessions.values()):
            try:
                reports.append(await BattleService.advance_session(session, elapsed, tick_seconds))
            except Exception as e:
                logger.error(f"Failed to advance session {session.user_id}: {e}", exc_info=True)
                end_session(session.user_id)
        return reports
