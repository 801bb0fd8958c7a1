"""
능력치 → 전투 스탯 변환

기본 능력치(힘/민첩)를 전투 스탯으로 변환하고 강화 비용을 계산합니다.
모든 함수는 부수효과가 없으며, 캐릭터 행의 파생 스탯은 여기서만 계산합니다.
"""
import logging
import math
from dataclasses import dataclass, asdict
from typing import TYPE_CHECKING

from config import CHARACTER as C, UPGRADE
from exceptions import InvalidAttributeError, InvalidLevelError

if TYPE_CHECKING:
    from models.character import Character

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DerivedStats:
    """능력치에서 변환된 전투 스탯"""
    max_hp: int
    attack_power: int
    crit_rate: float        # 0.0 ~ RATE_CAP
    crit_damage: float      # 배율
    attack_speed: float     # 초당 공격 횟수
    evasion_rate: float     # 0.0 ~ RATE_CAP
    dps: float


def _clamp_rate(rate: float) -> float:
    return max(0.0, min(rate, C.RATE_CAP))


def _validate_attribute(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidAttributeError(name, value)


def derive_stats(strength: int, dexterity: int) -> DerivedStats:
    """
    기본 능력치 → 전투 스탯 변환

    Args:
        strength: 힘 (0 이상)
        dexterity: 민첩 (0 이상)

    Returns:
        변환된 전투 스탯

    Raises:
        InvalidAttributeError: 음수 또는 정수가 아닌 능력치
    """
    _validate_attribute("strength", strength)
    _validate_attribute("dexterity", dexterity)

    attack_power = strength * C.ATTACK_PER_STR
    crit_rate = _clamp_rate(C.BASE_CRIT_RATE + dexterity * C.CRIT_RATE_PER_DEX)
    dps = attack_power * C.ATTACK_SPEED * (1 + crit_rate * C.CRIT_DAMAGE)

    return DerivedStats(
        max_hp=C.BASE_HP + strength * C.HP_PER_STR,
        attack_power=attack_power,
        crit_rate=crit_rate,
        crit_damage=C.CRIT_DAMAGE,
        attack_speed=C.ATTACK_SPEED,
        evasion_rate=_clamp_rate(dexterity * C.EVASION_PER_DEX),
        dps=dps,
    )


def upgrade_cost(level: int) -> int:
    """
    현재 레벨에서 다음 레벨로 강화하는 비용

    공식: floor(10 * 1.15^(level - 1))

    Raises:
        InvalidLevelError: 레벨이 1 미만
    """
    if isinstance(level, bool) or not isinstance(level, int) or level < 1:
        raise InvalidLevelError(level)
    return math.floor(UPGRADE.BASE_COST * UPGRADE.COST_GROWTH ** (level - 1))


def apply_derived_stats(character: "Character") -> DerivedStats:
    """캐릭터의 파생 스탯 컬럼을 기본 능력치 기준으로 덮어쓴다"""
    derived = derive_stats(character.strength, character.dexterity)
    for key, value in asdict(derived).items():
        setattr(character, key, value)
    return derived


def ensure_derived_stats(character: "Character") -> bool:
    """
    저장된 파생 스탯이 기본 능력치와 어긋나 있으면 교정

    Returns:
        교정이 일어났으면 True
    """
    derived = derive_stats(character.strength, character.dexterity)
    drifted = {
        key: getattr(character, key, None)
        for key, value in asdict(derived).items()
        if getattr(character, key, None) != value
    }
    if not drifted:
        return False

    logger.warning(
        f"Derived stat drift corrected: user={character.user_id}, stale={drifted}"
    )
    for key, value in asdict(derived).items():
        setattr(character, key, value)
    return True
