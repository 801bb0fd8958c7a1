from models.character import Character, UpgradeStat

__all__ = ["Character", "UpgradeStat"]
