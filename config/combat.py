"""전투 관련 설정"""
from dataclasses import dataclass


@dataclass(frozen=True)
class CombatConfig:
    """전투 설정"""

    # 틱 시뮬레이션
    TICK_SECONDS: float = 0.1
    """한 틱의 길이 (초)"""

    ATTACK_GAUGE_THRESHOLD: float = 1.0
    """몬스터 공격 게이지가 이 값을 넘으면 1회 공격"""

    MAX_CATCH_UP_TICKS: int = 36000
    """일괄 계산 시 최대 틱 수 (0.1초 기준 1시간)"""

    # 자동 전투 루프
    IDLE_LOOP_SECONDS: float = 1.0
    """자동 전투 배경 루프 주기 (초)"""

    MAX_ACTIVE_SESSIONS: int = 500
    """동시에 진행 가능한 자동 전투 세션 수"""


@dataclass(frozen=True)
class ProgressionConfig:
    """진행도/패널티 설정"""

    DEFEAT_GOLD_RATIO: float = 0.9
    """패배 시 남는 골드 비율 (10% 손실)"""

    DEFEAT_STAGE_PENALTY: int = 1
    """패배 시 후퇴하는 스테이지 수"""

    MIN_STAGE: int = 1
    """최소 스테이지"""


COMBAT = CombatConfig()
PROGRESSION = ProgressionConfig()
