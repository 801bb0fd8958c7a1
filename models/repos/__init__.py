from models.repos.character_repo import (
    exists_character,
    find_character,
    get_or_create_character,
    load_character,
    save_character,
)

__all__ = [
    "exists_character",
    "find_character",
    "get_or_create_character",
    "load_character",
    "save_character",
]
