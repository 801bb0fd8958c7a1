"""
진행도 서비스 모듈

승리/패배/강화에 따른 캐릭터 상태 전이를 담당합니다.
"""
from service.progression.progression_service import (
    DefeatResult,
    UpgradeOutcome,
    UpgradeResult,
    VictoryResult,
    current_encounter,
    resolve_defeat,
    resolve_victory,
    upgrade,
)

__all__ = [
    "DefeatResult",
    "UpgradeOutcome",
    "UpgradeResult",
    "VictoryResult",
    "current_encounter",
    "resolve_defeat",
    "resolve_victory",
    "upgrade",
]
