"""배경 작업 Cog - 자동 전투 틱 루프"""
import logging
import time

from discord.ext import commands, tasks

from config import COMBAT
from service.battle.battle_service import BattleService

logger = logging.getLogger(__name__)


class BackgroundTasksCog(commands.Cog):
    """주기적 배경 작업 관리"""

    def __init__(self, bot):
        self.bot = bot
        self._last_tick = None
        self.advance_idle_battles.start()
        logger.info("BackgroundTasksCog initialized")

    def cog_unload(self):
        """Cog 언로드 시 작업 정지"""
        self.advance_idle_battles.cancel()
        logger.info("BackgroundTasksCog unloaded")

    @tasks.loop(seconds=COMBAT.IDLE_LOOP_SECONDS)
    async def advance_idle_battles(self):
        """자동 전투 세션 진행 (실제 경과 시간 기준)"""
        now = time.monotonic()
        elapsed = COMBAT.IDLE_LOOP_SECONDS if self._last_tick is None else now - self._last_tick
        self._last_tick = now

        try:
            reports = await BattleService.advance_all_sessions(elapsed)
        except Exception as e:
            logger.error(f"Failed to advance idle battles: {e}", exc_info=True)
            return

        kills = sum(r.kills for r in reports)
        deaths = sum(r.deaths for r in reports)
        if kills or deaths:
            logger.debug(f"Idle loop: sessions={len(reports)}, kills={kills}, deaths={deaths}")

    @advance_idle_battles.before_loop
    async def before_advance(self):
        """봇 준비 대기"""
        await self.bot.wait_until_ready()
        logger.info("Idle battle loop ready")


async def setup(bot):
    """Cog 로드"""
    await bot.add_cog(BackgroundTasksCog(bot))
