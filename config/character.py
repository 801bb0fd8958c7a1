"""캐릭터 스탯 관련 설정"""
from dataclasses import dataclass


@dataclass(frozen=True)
class CharacterConfig:
    """캐릭터 초기값 및 능력치 → 전투 스탯 변환 계수"""

    # 첫 로그인 시 생성되는 캐릭터
    INITIAL_STRENGTH: int = 1
    """초기 힘"""

    INITIAL_DEXTERITY: int = 1
    """초기 민첩"""

    INITIAL_GOLD: int = 10
    """초기 골드"""

    INITIAL_STAGE: int = 1
    """초기 스테이지"""

    # 힘 변환 계수
    ATTACK_PER_STR: int = 5
    """힘 1당 공격력"""

    BASE_HP: int = 50
    """기본 최대 HP"""

    HP_PER_STR: int = 10
    """힘 1당 최대 HP"""

    # 민첩 변환 계수
    BASE_CRIT_RATE: float = 0.05
    """기본 치명타 확률"""

    CRIT_RATE_PER_DEX: float = 0.005
    """민첩 1당 치명타 확률"""

    EVASION_PER_DEX: float = 0.002
    """민첩 1당 회피율"""

    RATE_CAP: float = 0.99
    """치명타/회피율 상한 (1 미만)"""

    # 강화로 변하지 않는 상수
    CRIT_DAMAGE: float = 1.5
    """치명타 데미지 배율"""

    ATTACK_SPEED: float = 1.0
    """초당 공격 횟수"""


@dataclass(frozen=True)
class UpgradeConfig:
    """스탯 강화 비용 설정"""

    BASE_COST: int = 10
    """레벨 1 → 2 강화 비용"""

    COST_GROWTH: float = 1.15
    """레벨당 비용 증가율"""


CHARACTER = CharacterConfig()
UPGRADE = UpgradeConfig()
