"""
방치형 RPG 명령어 (캐릭터, 강화, 전투)
"""
import logging

import discord
from discord import app_commands
from discord.ext import commands

from exceptions import IdleRPGError
from service.battle.battle_service import BattleService
from service.character_service import CharacterService
from service.progression.progression_service import current_encounter
from service.session import get_session
from views.embeds import (
    create_battle_result_embed,
    create_character_embed,
    create_monster_embed,
    create_session_embed,
    create_upgrade_embed,
)

logger = logging.getLogger(__name__)


class IdleCommand(commands.Cog):
    """방치형 RPG 명령어"""

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    async def cog_app_command_error(self, interaction: discord.Interaction, error: app_commands.AppCommandError):
        original = getattr(error, "original", error)
        if isinstance(original, IdleRPGError):
            message = f"❌ {original.message}"
        else:
            logger.error(f"Idle command failed: {original}", exc_info=original)
            message = "⚠️ 처리 중 오류가 발생했습니다. 잠시 후 다시 시도해주세요."

        if interaction.response.is_done():
            await interaction.followup.send(message, ephemeral=True)
        else:
            await interaction.response.send_message(message, ephemeral=True)

    @app_commands.command(name="캐릭터", description="🧍 내 캐릭터와 현재 몬스터를 확인합니다")
    async def character_info(self, interaction: discord.Interaction):
        user_id = str(interaction.user.id)
        character = await CharacterService.get_character(user_id)

        session = get_session(user_id)
        if session is not None and session.battle is not None:
            monster_embed = create_monster_embed(
                session.battle.encounter, session.battle.character_hp, character.max_hp
            )
        else:
            monster_embed = create_monster_embed(current_encounter(character))

        await interaction.response.send_message(
            embeds=[create_character_embed(character, interaction.user.display_name), monster_embed],
            ephemeral=True,
        )

    @app_commands.command(name="강화", description="💪 골드로 능력치를 강화합니다")
    @app_commands.describe(스탯="강화할 능력치")
    @app_commands.choices(스탯=[
        app_commands.Choice(name="💪 힘", value="strength"),
        app_commands.Choice(name="🏹 민첩", value="dexterity"),
    ])
    async def upgrade_stat(self, interaction: discord.Interaction, 스탯: app_commands.Choice[str]):
        result = await CharacterService.upgrade_stat(str(interaction.user.id), 스탯.value)
        await interaction.response.send_message(embed=create_upgrade_embed(result), ephemeral=True)

    @app_commands.command(name="전투", description="⚔️ 현재 몬스터와 결판이 날 때까지 싸웁니다")
    async def fight(self, interaction: discord.Interaction):
        await interaction.response.defer(ephemeral=True, thinking=True)
        result = await CharacterService.fight_current_monster(str(interaction.user.id))
        await interaction.followup.send(embed=create_battle_result_embed(result.outcome), ephemeral=True)

    @app_commands.command(name="자동전투시작", description="🤖 자동 전투를 시작합니다")
    async def start_idle(self, interaction: discord.Interaction):
        user_id = str(interaction.user.id)
        if get_session(user_id) is not None:
            await interaction.response.send_message("이미 자동 전투 중입니다.", ephemeral=True)
            return

        session = await BattleService.start_session(user_id)
        await interaction.response.send_message(
            f"🤖 자동 전투를 시작합니다! 상대: **{session.battle.encounter.name}**",
            ephemeral=True,
        )

    @app_commands.command(name="자동전투중지", description="🛑 자동 전투를 중지합니다")
    async def stop_idle(self, interaction: discord.Interaction):
        session = BattleService.stop_session(str(interaction.user.id))
        if session is None:
            await interaction.response.send_message("진행 중인 자동 전투가 없습니다.", ephemeral=True)
            return

        await interaction.response.send_message(embed=create_session_embed(session), ephemeral=True)


async def setup(bot: commands.Bot):
    await bot.add_cog(IdleCommand(bot))
