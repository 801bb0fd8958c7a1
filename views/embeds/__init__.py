"""임베드 생성 유틸리티"""
from views.embeds.character_embeds import (
    create_character_embed,
    create_monster_embed,
    create_upgrade_embed,
    create_battle_result_embed,
    create_session_embed,
)

__all__ = [
    "create_character_embed",
    "create_monster_embed",
    "create_upgrade_embed",
    "create_battle_result_embed",
    "create_session_embed",
]
