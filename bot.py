# bot.py
import os
import discord
from discord.ext import commands
from dotenv import load_dotenv
from tortoise import Tortoise

import logging

# 로그 기본 설정
logging.basicConfig(
    level=logging.INFO,  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)

load_dotenv()

is_dev = os.getenv('DEV')
GUILD_ID = int(os.getenv('GUILD_ID') or 0)
if is_dev == "TRUE":
    APPLICATION_ID = int(os.getenv('DEV_APPLICATION_ID') or 0)
    TOKEN = os.getenv('DEV_DISCORD_TOKEN')
else:
    APPLICATION_ID = int(os.getenv('APPLICATION_ID') or 0)
    TOKEN = os.getenv('DISCORD_TOKEN')

DATABASE_URL = os.getenv('DATABASE_URL') or "sqlite://db.sqlite3"

COGS = ("idle_command", "background_tasks")


class IdleBot(commands.Bot):
    def __init__(self):
        intents = discord.Intents.default()
        super().__init__(
            command_prefix="!",
            intents=intents,
            application_id=APPLICATION_ID
        )

    async def setup_hook(self):
        logging.info("데이터 베이스 연결 시작")
        await self.init_db()
        logging.info("데이터 베이스 연결")

        for name in COGS:
            await self.load_extension(f"cogs.{name}")
            logging.info(f"Loaded cogs.{name}")

        guild = discord.Object(id=GUILD_ID)
        self.tree.copy_global_to(guild=guild)
        guild_synced = await self.tree.sync(guild=guild)
        logging.info(f"길드 {len(guild_synced)}개 re-synced: {[c.name for c in guild_synced]}")

    async def init_db(self):
        await Tortoise.init(
            db_url=DATABASE_URL,
            modules={"models": ["models"]}
        )
        await Tortoise.generate_schemas(safe=True)

    async def close(self):
        await super().close()
        await Tortoise.close_connections()

    async def on_ready(self):
        logging.info(f"Logged in as {self.user} (ID: {self.user.id})")


def main():
    if not TOKEN or not APPLICATION_ID or not GUILD_ID:
        raise RuntimeError("환경변수 DISCORD_TOKEN, APPLICATION_ID, GUILD_ID를 .env에 모두 설정해주세요")

    bot = IdleBot()
    bot.run(TOKEN, log_handler=None)


if __name__ == "__main__":
    main()
