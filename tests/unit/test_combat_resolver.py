"""
CombatResolver 유닛 테스트

틱 단위 데미지 교환, 공격 게이지, 승패 판정, 일괄 계산을 테스트합니다.
"""
import pytest

from config import MonsterGrade
from service.combat.combat_resolver import (
    BattleState,
    CombatState,
    resolve_combat_tick,
    simulate_battle,
    start_battle,
)
from service.monster.monster_generator import Encounter, monster_for_stage


def make_encounter(hp: float = 100, attack: int = 10, attack_speed: float = 1.0) -> Encounter:
    return Encounter(
        name="Normal 허수아비",
        grade=MonsterGrade.NORMAL,
        stage=1,
        progress=0,
        max_hp=int(hp),
        current_hp=hp,
        attack_power=attack,
        attack_speed=attack_speed,
        gold_reward=1,
    )


class TestStartBattle:

    def test_character_starts_at_full_hp(self, test_character):
        battle = start_battle(test_character, monster_for_stage(1, 0))

        assert battle.character_hp == test_character.max_hp
        assert battle.attack_gauge == 0
        assert battle.state == CombatState.ACTIVE
        assert battle.is_finished is False


class TestPlayerDamage:
    """플레이어 공격 단계 테스트"""

    def test_damage_is_dps_times_tick(self, test_character):
        battle = start_battle(test_character, make_encounter(hp=100, attack_speed=0))

        result = resolve_combat_tick(test_character, battle, 1.0)

        assert result.damage_dealt == pytest.approx(test_character.dps)
        assert result.battle.encounter.current_hp == pytest.approx(100 - test_character.dps)
        assert result.state == CombatState.ACTIVE

    def test_monster_defeated(self, test_character):
        battle = start_battle(test_character, make_encounter(hp=5, attack_speed=0))

        result = resolve_combat_tick(test_character, battle, 1.0)

        assert result.state == CombatState.WON
        assert result.battle.encounter.current_hp == 0
        assert result.battle.is_finished

    def test_simultaneous_kill_favors_player(self, test_character):
        """같은 틱에 둘 다 쓰러질 수 있으면 플레이어 승리"""
        battle = BattleState(
            encounter=make_encounter(hp=1, attack=1000, attack_speed=10),
            character_hp=1,
            attack_gauge=0.99,
        )

        result = resolve_combat_tick(test_character, battle, 1.0)

        assert result.state == CombatState.WON
        assert result.battle.character_hp == 1
        assert result.hits_taken == 0


class TestMonsterDamage:
    """몬스터 공격 단계 테스트"""

    def test_gauge_accumulates_until_attack(self, test_character):
        battle = start_battle(test_character, make_encounter(hp=1000, attack=7, attack_speed=0.5))

        first = resolve_combat_tick(test_character, battle, 1.0)
        assert first.hits_taken == 0
        assert first.battle.attack_gauge == pytest.approx(0.5)
        assert first.battle.character_hp == test_character.max_hp

        second = resolve_combat_tick(test_character, first.battle, 1.0)
        assert second.hits_taken == 1
        assert second.damage_taken == 7
        assert second.battle.attack_gauge == pytest.approx(0.0)
        assert second.battle.character_hp == test_character.max_hp - 7

    def test_multiple_hits_per_tick(self, test_character):
        """공격 속도 > 1이면 한 틱에 여러 번 공격"""
        battle = start_battle(test_character, make_encounter(hp=1000, attack=4, attack_speed=3.0))

        result = resolve_combat_tick(test_character, battle, 1.0)

        assert result.hits_taken == 3
        assert result.damage_taken == 12
        assert result.battle.character_hp == test_character.max_hp - 12

    def test_character_defeated(self, test_character):
        battle = BattleState(encounter=make_encounter(hp=1000, attack=10), character_hp=5)

        result = resolve_combat_tick(test_character, battle, 1.0)

        assert result.state == CombatState.LOST
        assert result.battle.character_hp == 0
        assert result.battle.encounter.current_hp < 1000

    def test_evasion_with_rng(self, test_character, always_evade_rng):
        """난수 생성기를 넘기면 회피 판정"""
        battle = start_battle(test_character, make_encounter(hp=1000, attack=10, attack_speed=2.0))

        result = resolve_combat_tick(test_character, battle, 1.0, rng=always_evade_rng)

        assert result.hits_taken == 0
        assert result.hits_evaded == 2
        assert result.battle.character_hp == test_character.max_hp

    def test_no_evasion_without_rng(self, character_factory):
        character = character_factory(dexterity=400)
        battle = start_battle(character, make_encounter(hp=1000, attack=10, attack_speed=2.0))

        result = resolve_combat_tick(character, battle, 1.0)

        assert result.hits_taken == 2


class TestEdgeCases:
    """경계 조건 테스트"""

    def test_finished_battle_unchanged(self, test_character):
        battle = BattleState(
            encounter=make_encounter(hp=0),
            character_hp=10,
            state=CombatState.WON,
        )

        result = resolve_combat_tick(test_character, battle, 1.0)

        assert result.state == CombatState.WON
        assert result.battle is battle

    def test_negative_tick_clamped(self, test_character):
        battle = start_battle(test_character, make_encounter(hp=100))

        result = resolve_combat_tick(test_character, battle, -3.0)

        assert result.state == CombatState.ACTIVE
        assert result.battle.encounter.current_hp == 100
        assert result.battle.character_hp == test_character.max_hp

    def test_negative_character_hp_is_lost(self, test_character):
        battle = BattleState(encounter=make_encounter(hp=100), character_hp=-5)

        result = resolve_combat_tick(test_character, battle, 0.1)

        assert result.state == CombatState.LOST
        assert result.battle.character_hp == 0

    def test_negative_monster_hp_is_won(self, test_character):
        battle = BattleState(encounter=make_encounter(hp=-10), character_hp=10)

        result = resolve_combat_tick(test_character, battle, 0.1)

        assert result.state == CombatState.WON

    def test_inputs_not_mutated(self, test_character):
        encounter = make_encounter(hp=100, attack=3, attack_speed=5.0)
        battle = start_battle(test_character, encounter)

        resolve_combat_tick(test_character, battle, 1.0)

        assert encounter.current_hp == 100
        assert battle.character_hp == test_character.max_hp
        assert battle.attack_gauge == 0


class TestSimulateBattle:
    """일괄 계산 테스트"""

    def test_runs_until_monster_defeated(self, test_character):
        battle = start_battle(test_character, monster_for_stage(1, 0))

        final = simulate_battle(test_character, battle, tick_seconds=0.1)

        assert final.state == CombatState.WON
        assert final.elapsed == pytest.approx(1.9)
        assert final.character_hp > 0

    def test_runs_until_character_defeated(self, test_character):
        battle = start_battle(test_character, make_encounter(hp=10_000, attack=30, attack_speed=1.0))

        final = simulate_battle(test_character, battle, tick_seconds=0.5)

        assert final.state == CombatState.LOST
        assert final.character_hp == 0

    def test_stops_at_max_ticks(self, test_character):
        battle = start_battle(test_character, make_encounter(hp=10_000, attack=0, attack_speed=0))

        final = simulate_battle(test_character, battle, tick_seconds=0.1, max_ticks=10)

        assert final.state == CombatState.ACTIVE
        assert final.elapsed == pytest.approx(1.0)

    def test_tick_size_does_not_change_winner(self, character_factory):
        """틱 길이와 무관하게 같은 승자"""
        character = character_factory(strength=3)
        encounter = monster_for_stage(2, 1)

        fine = simulate_battle(character, start_battle(character, encounter), tick_seconds=0.05)
        coarse = simulate_battle(character, start_battle(character, encounter), tick_seconds=0.5)

        assert fine.state == coarse.state == CombatState.WON
