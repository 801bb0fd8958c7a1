"""
Character Repository

캐릭터 데이터 접근 레이어입니다.
불러온 행은 사용 전에 파생 스탯을 기본 능력치 기준으로 교정합니다.
"""
import logging
from typing import Optional

from exceptions import CharacterNotFoundError
from models.character import Character
from service.player.stat_model import apply_derived_stats, ensure_derived_stats

logger = logging.getLogger(__name__)


async def find_character(user_id: str) -> Optional[Character]:
    """
    사용자 ID로 캐릭터 조회

    Args:
        user_id: 인증된 사용자 ID

    Returns:
        Character 객체 또는 None
    """
    character = await Character.get_or_none(user_id=user_id)
    if character is not None and ensure_derived_stats(character):
        await character.save()
    return character


async def load_character(user_id: str) -> Character:
    """
    캐릭터 조회 (없으면 예외)

    Raises:
        CharacterNotFoundError: 캐릭터가 없음
    """
    character = await find_character(user_id)
    if character is None:
        raise CharacterNotFoundError(user_id)
    return character


async def get_or_create_character(user_id: str) -> Character:
    """
    캐릭터 조회 또는 생성

    첫 로그인 시 기본 능력치(힘 1, 민첩 1, 골드 10, 스테이지 1)로 생성합니다.
    """
    character = await find_character(user_id)
    if character is not None:
        return character

    character = Character(user_id=user_id)
    apply_derived_stats(character)
    await character.save()
    logger.info(f"Character created: user={user_id}")
    return character


async def save_character(character: Character) -> None:
    """캐릭터 저장"""
    await character.save()


async def exists_character(user_id: str) -> bool:
    return await Character.exists(user_id=user_id)
