"""
Character Embeds

캐릭터/몬스터/전투 결과의 Discord Embed 생성을 담당합니다.
"""
from typing import Optional

import discord

from config import MonsterGrade
from models.character import Character, UpgradeStat
from service.monster.monster_generator import Encounter, kills_required
from service.player.stat_model import upgrade_cost
from service.progression.progression_service import DefeatResult, UpgradeResult, VictoryResult
from service.session import BattleSession

STAT_LABELS = {
    UpgradeStat.STRENGTH: "💪 힘",
    UpgradeStat.DEXTERITY: "🏹 민첩",
}

GRADE_COLORS = {
    MonsterGrade.NORMAL: discord.Color.light_gray(),
    MonsterGrade.ELITE: discord.Color.blue(),
    MonsterGrade.BOSS: discord.Color.magenta(),
}


def format_number(num: float) -> str:
    if num >= 1e6:
        return f"{num / 1e6:.1f}M"
    return f"{int(num):,}"


def _hp_bar(current: float, maximum: float, length: int = 10) -> str:
    ratio = 0 if maximum <= 0 else max(0.0, min(1.0, current / maximum))
    filled = round(ratio * length)
    return "🟥" * filled + "⬛" * (length - filled)


def create_character_embed(character: Character, display_name: str) -> discord.Embed:
    """캐릭터 정보 Embed 생성"""
    required = kills_required(character.current_stage)
    progress_text = (
        "👑 보스 등장!"
        if character.stage_progress >= required
        else f"{character.stage_progress}/{required}"
    )

    embed = discord.Embed(
        title=f"⚔️ {display_name}의 캐릭터",
        description=f"**스테이지 {character.current_stage}** · 진행도 {progress_text}",
        color=discord.Color.gold(),
    )
    embed.add_field(name="💰 골드", value=format_number(character.gold), inline=False)

    for stat, label in STAT_LABELS.items():
        level = character.get_level(stat)
        embed.add_field(
            name=f"{label} Lv.{level}",
            value=f"강화 비용: {format_number(upgrade_cost(max(level, 1)))}G",
            inline=True,
        )

    embed.add_field(
        name="📊 전투 스탯",
        value=(
            f"❤️ 최대 HP: {character.max_hp}\n"
            f"⚔️ 공격력: {character.attack_power}\n"
            f"💥 치명타: {character.crit_rate * 100:.1f}% (x{character.crit_damage})\n"
            f"⚡ 공격 속도: {character.attack_speed:.2f}/s\n"
            f"💨 회피율: {character.evasion_rate * 100:.1f}%\n"
            f"🔥 DPS: {character.dps:.2f}"
        ),
        inline=False,
    )
    return embed


def create_monster_embed(encounter: Encounter, character_hp: Optional[float] = None,
                         character_max_hp: Optional[int] = None) -> discord.Embed:
    """현재 몬스터 Embed 생성"""
    embed = discord.Embed(
        title=f"👾 {encounter.name}",
        description=f"스테이지 {encounter.stage}",
        color=GRADE_COLORS.get(encounter.grade, discord.Color.light_gray()),
    )
    embed.add_field(
        name="HP",
        value=f"{_hp_bar(encounter.current_hp, encounter.max_hp)} "
              f"{format_number(max(0, encounter.current_hp))}/{format_number(encounter.max_hp)}",
        inline=False,
    )
    embed.add_field(name="⚔️ 공격력", value=str(encounter.attack_power), inline=True)
    embed.add_field(name="⚡ 공격 속도", value=f"{encounter.attack_speed:.2f}/s", inline=True)
    embed.add_field(name="💰 보상", value=f"{format_number(encounter.gold_reward)}G", inline=True)

    if character_hp is not None and character_max_hp:
        embed.add_field(
            name="🧍 내 HP",
            value=f"{_hp_bar(character_hp, character_max_hp)} {int(max(0, character_hp))}/{character_max_hp}",
            inline=False,
        )
    return embed


def create_upgrade_embed(result: UpgradeResult) -> discord.Embed:
    """강화 결과 Embed 생성"""
    label = STAT_LABELS[result.stat]
    if not result.success:
        return discord.Embed(
            title="❌ 골드가 부족합니다",
            description=(
                f"{label} 강화에 {format_number(result.cost)}G가 필요합니다.\n"
                f"보유: {format_number(result.character.gold)}G (부족: {format_number(result.shortage)}G)"
            ),
            color=discord.Color.red(),
        )

    character = result.character
    return discord.Embed(
        title="✅ 강화 성공!",
        description=(
            f"{label} Lv.{character.get_level(result.stat)} (-{format_number(result.cost)}G)\n"
            f"💰 남은 골드: {format_number(character.gold)}G\n"
            f"🔥 DPS: {character.dps:.2f} · ❤️ 최대 HP: {character.max_hp}"
        ),
        color=discord.Color.green(),
    )


def create_battle_result_embed(outcome) -> discord.Embed:
    """일괄 전투 결과 Embed 생성"""
    if isinstance(outcome, VictoryResult):
        description = f"💰 +{format_number(outcome.gold_earned)}G"
        if outcome.stage_cleared:
            description += f"\n🎉 스테이지 클리어! → 스테이지 {outcome.character.current_stage}"
        description += f"\n\n다음 상대: **{outcome.encounter.name}**"
        return discord.Embed(title="🏆 승리!", description=description, color=discord.Color.green())

    if isinstance(outcome, DefeatResult):
        return discord.Embed(
            title="💀 패배...",
            description=(
                f"스테이지 {outcome.character.current_stage}(으)로 후퇴했습니다.\n"
                f"💸 -{format_number(outcome.gold_lost)}G"
            ),
            color=discord.Color.dark_red(),
        )

    return discord.Embed(
        title="⏳ 승부가 나지 않았습니다",
        description="전투가 너무 길어져 중단되었습니다. 능력치를 강화해보세요.",
        color=discord.Color.orange(),
    )


def create_session_embed(session: BattleSession) -> discord.Embed:
    """자동 전투 세션 요약 Embed 생성"""
    embed = discord.Embed(title="🤖 자동 전투", color=discord.Color.blurple())
    embed.add_field(name="처치", value=str(session.kills), inline=True)
    embed.add_field(name="사망", value=str(session.deaths), inline=True)
    embed.add_field(name="획득 골드", value=f"{format_number(session.gold_earned)}G", inline=True)
    minutes, seconds = divmod(int(session.running_seconds), 60)
    embed.add_field(name="⏱️ 진행 시간", value=f"{minutes}분 {seconds}초", inline=True)
    if session.last_event:
        embed.set_footer(text=session.last_event)
    return embed
