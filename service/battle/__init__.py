"""
자동 전투 서비스 모듈

세션별 전투를 배경 루프 주기마다 진행합니다.
"""
from service.battle.battle_service import AdvanceReport, BattleService

__all__ = ["AdvanceReport", "BattleService"]
