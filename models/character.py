"""
Character 모델 정의

계정당 하나의 방치형 캐릭터 행을 저장합니다.
파생 스탯 컬럼은 항상 기본 능력치(힘/민첩)로부터 다시 계산됩니다.
"""
from enum import Enum

from tortoise import models, fields
from tortoise.validators import MinValueValidator

from config import CHARACTER
from service.player.stat_model import derive_stats


class UpgradeStat(str, Enum):
    """강화 가능한 기본 능력치 (모델 필드명과 동일)"""
    STRENGTH = "strength"
    DEXTERITY = "dexterity"


_INITIAL = derive_stats(CHARACTER.INITIAL_STRENGTH, CHARACTER.INITIAL_DEXTERITY)


class Character(models.Model):
    """
    방치형 RPG 캐릭터

    - 기본 능력치: strength, dexterity (강화 대상)
    - 파생 스탯: stat_model.derive_stats 결과를 그대로 저장
    - 진행도: current_stage, stage_progress (보스 대기 시 progress == 스테이지 번호)
    """

    id = fields.IntField(pk=True)
    user_id = fields.CharField(max_length=64, unique=True)

    # 기본 능력치
    strength = fields.IntField(default=CHARACTER.INITIAL_STRENGTH, validators=[MinValueValidator(0)])
    dexterity = fields.IntField(default=CHARACTER.INITIAL_DEXTERITY, validators=[MinValueValidator(0)])

    # 파생 스탯 (기본값은 초기 능력치 기준)
    max_hp = fields.IntField(default=_INITIAL.max_hp)
    attack_power = fields.IntField(default=_INITIAL.attack_power)
    crit_rate = fields.FloatField(default=_INITIAL.crit_rate)
    crit_damage = fields.FloatField(default=_INITIAL.crit_damage)
    attack_speed = fields.FloatField(default=_INITIAL.attack_speed)
    evasion_rate = fields.FloatField(default=_INITIAL.evasion_rate)
    dps = fields.FloatField(default=_INITIAL.dps)

    # 재화
    gold = fields.BigIntField(default=CHARACTER.INITIAL_GOLD, validators=[MinValueValidator(0)])

    # 진행도
    current_stage = fields.IntField(default=CHARACTER.INITIAL_STAGE, validators=[MinValueValidator(1)])
    stage_progress = fields.IntField(default=0, validators=[MinValueValidator(0)])

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    def get_level(self, stat: UpgradeStat) -> int:
        return getattr(self, stat.value)

    def __str__(self):
        return f"Character({self.user_id}, stage={self.current_stage}, gold={self.gold})"

    class Meta:
        table = "characters"
