"""
전투 시스템 서비스 모듈

틱 단위 데미지 교환과 전투 종료 판정을 담당합니다.
"""
from service.combat.combat_resolver import (
    BattleState,
    CombatState,
    TickResult,
    resolve_combat_tick,
    simulate_battle,
    start_battle,
)

__all__ = [
    "BattleState",
    "CombatState",
    "TickResult",
    "resolve_combat_tick",
    "simulate_battle",
    "start_battle",
]
