import asyncio
import random
import time
import logging
from contextlib import asynccontextmanager
from enum import IntEnum
from typing import Optional

from service.combat.combat_resolver import BattleState


class SessionType(IntEnum):  # 숫자 기반 enum
    IDLE = 1
    FIGHT = 2
    STOPPED = 3


class BattleSession:
    """유저 한 명의 자동 전투 상태 (전역 게임 루프 대신 세션마다 보관)"""

    def __init__(self, user_id: str, rng: Optional[random.Random] = None):
        self.user_id = user_id
        self.battle: Optional[BattleState] = None
        self.status = SessionType.IDLE
        self.start_time = time.monotonic()
        self.ended = False
        self.kills = 0
        self.deaths = 0
        self.gold_earned = 0
        self.last_event: Optional[str] = None
        self.elapsed_remainder = 0.0
        """틱 하나에 못 미쳐 다음 진행으로 넘긴 시간 (초)"""
        self.rng = rng if rng is not None else random.Random()
        """회피 판정용 난수 생성기"""

    @property
    def running_seconds(self) -> float:
        return time.monotonic() - self.start_time


active_sessions: dict[str, BattleSession] = {}
character_locks: dict[str, asyncio.Lock] = {}
lock_holders: dict[str, int] = {}
"""락을 잡고 있거나 기다리는 코루틴 수"""


@asynccontextmanager
async def character_lock(user_id: str):
    """
    캐릭터별 변경 직렬화

    아무도 잡고 있거나 기다리지 않게 되면 락을 정리하므로
    락 수는 동시에 요청 중인 유저 수를 넘지 않습니다.
    """
    lock = character_locks.get(user_id)
    if lock is None:
        lock = asyncio.Lock()
        character_locks[user_id] = lock
    lock_holders[user_id] = lock_holders.get(user_id, 0) + 1
    try:
        async with lock:
            yield
    finally:
        lock_holders[user_id] -= 1
        if lock_holders[user_id] == 0:
            del lock_holders[user_id]
            character_locks.pop(user_id, None)


def create_session(user_id: str, rng: Optional[random.Random] = None) -> BattleSession:
    logging.info(f"Creating session for {user_id}")
    session = BattleSession(user_id, rng)
    active_sessions[user_id] = session
    return session


def get_session(user_id: str) -> BattleSession | None:
    return active_sessions.get(user_id)


def end_session(user_id: str) -> Optional[BattleSession]:
    session = active_sessions.pop(user_id, None)
    if session is not None:
        logging.info(f"End session for {user_id}")
        session.ended = True
        session.status = SessionType.STOPPED
    return session


def is_in_session(user_id: str) -> bool:
    return user_id in active_sessions and not active_sessions[user_id].ended
