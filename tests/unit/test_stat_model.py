"""
StatModel 유닛 테스트

능력치 → 전투 스탯 변환, 강화 비용, 파생 스탯 교정을 테스트합니다.
"""
import pytest

from config import CHARACTER
from exceptions import InvalidAttributeError, InvalidLevelError
from service.player.stat_model import (
    DerivedStats,
    apply_derived_stats,
    derive_stats,
    ensure_derived_stats,
    upgrade_cost,
)


class TestDeriveStats:
    """전투 스탯 변환 테스트"""

    def test_initial_character(self):
        """힘 1, 민첩 1 기본 캐릭터"""
        stats = derive_stats(1, 1)

        assert stats.attack_power == 5
        assert stats.max_hp == 60
        assert stats.crit_rate == pytest.approx(0.055)
        assert stats.evasion_rate == pytest.approx(0.002)
        assert stats.crit_damage == 1.5
        assert stats.attack_speed == 1.0
        # 5 * 1.0 * (1 + 0.055 * 1.5)
        assert stats.dps == pytest.approx(5.4125)

    def test_zero_attributes(self):
        """능력치 0도 유효"""
        stats = derive_stats(0, 0)

        assert stats.attack_power == 0
        assert stats.max_hp == 50
        assert stats.crit_rate == pytest.approx(0.05)
        assert stats.evasion_rate == 0
        assert stats.dps == 0

    def test_strength_scaling(self):
        """힘은 공격력과 HP만 올린다"""
        low = derive_stats(1, 1)
        high = derive_stats(10, 1)

        assert high.attack_power == 50
        assert high.max_hp == 150
        assert high.crit_rate == low.crit_rate
        assert high.evasion_rate == low.evasion_rate

    def test_dexterity_scaling(self):
        """민첩은 치명타/회피만 올린다"""
        stats = derive_stats(1, 20)

        assert stats.crit_rate == pytest.approx(0.15)
        assert stats.evasion_rate == pytest.approx(0.04)
        assert stats.attack_power == 5

    def test_rates_clamped_below_one(self):
        """치명타/회피율은 1 미만으로 제한"""
        stats = derive_stats(1, 10_000)

        assert stats.crit_rate == CHARACTER.RATE_CAP
        assert stats.evasion_rate == CHARACTER.RATE_CAP
        assert stats.crit_rate < 1
        assert stats.evasion_rate < 1

    @pytest.mark.parametrize("strength,dexterity", [(1, 1), (7, 3), (0, 25), (300, 300)])
    def test_deterministic(self, strength, dexterity):
        """같은 입력이면 같은 결과"""
        assert derive_stats(strength, dexterity) == derive_stats(strength, dexterity)

    def test_returns_frozen_dataclass(self):
        stats = derive_stats(1, 1)
        assert isinstance(stats, DerivedStats)
        with pytest.raises(Exception):
            stats.max_hp = 999

    @pytest.mark.parametrize("strength,dexterity", [(-1, 1), (1, -1), (-5, -5)])
    def test_negative_attribute_rejected(self, strength, dexterity):
        """음수 능력치는 InvalidAttributeError"""
        with pytest.raises(InvalidAttributeError):
            derive_stats(strength, dexterity)

    def test_non_integer_attribute_rejected(self):
        with pytest.raises(InvalidAttributeError) as exc_info:
            derive_stats(1.5, 1)
        assert exc_info.value.attribute == "strength"


class TestUpgradeCost:
    """강화 비용 테스트"""

    def test_level_one_cost(self):
        assert upgrade_cost(1) == 10

    def test_known_values(self):
        # floor(10 * 1.15^(n-1))
        assert upgrade_cost(2) == 11
        assert upgrade_cost(3) == 13
        assert upgrade_cost(5) == 17
        assert upgrade_cost(10) == 35

    def test_strictly_increasing(self):
        """레벨이 오르면 비용은 반드시 증가"""
        costs = [upgrade_cost(level) for level in range(1, 101)]
        assert all(a < b for a, b in zip(costs, costs[1:]))

    def test_returns_int(self):
        assert isinstance(upgrade_cost(7), int)

    @pytest.mark.parametrize("level", [0, -1, -100])
    def test_invalid_level(self, level):
        with pytest.raises(InvalidLevelError) as exc_info:
            upgrade_cost(level)
        assert exc_info.value.level == level


class TestDerivedStatSync:
    """캐릭터 파생 스탯 동기화 테스트"""

    def test_apply_overwrites_columns(self, character_factory):
        character = character_factory(strength=4, dexterity=2)
        character.max_hp = 1
        character.dps = 0.0

        apply_derived_stats(character)

        assert character.max_hp == 90
        assert character.attack_power == 20
        assert character.dps == derive_stats(4, 2).dps

    def test_ensure_reports_no_drift(self, test_character):
        assert ensure_derived_stats(test_character) is False

    def test_ensure_corrects_drift(self, test_character):
        """어긋난 파생 스탯은 사용 전에 교정"""
        test_character.attack_power = 9999
        test_character.crit_rate = 0.9

        assert ensure_derived_stats(test_character) is True
        assert test_character.attack_power == 5
        assert test_character.crit_rate == pytest.approx(0.055)
        assert ensure_derived_stats(test_character) is False
