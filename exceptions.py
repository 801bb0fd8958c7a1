"""
IdleRPG 커스텀 예외 클래스 정의

모든 예외는 IdleRPGError를 상속받아 일관된 에러 처리를 제공합니다.
골드 부족은 예외가 아니라 UpgradeOutcome으로 전달됩니다.
"""


class IdleRPGError(Exception):
    """IdleRPG 기본 예외 클래스"""

    def __init__(self, message: str = "알 수 없는 오류가 발생했습니다"):
        self.message = message
        super().__init__(self.message)


# =============================================================================
# 캐릭터 관련 예외
# =============================================================================


class CharacterNotFoundError(IdleRPGError):
    """캐릭터를 찾을 수 없음"""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"캐릭터를 찾을 수 없습니다: {user_id}")


class InvalidAttributeError(IdleRPGError):
    """잘못된 기본 능력치 (음수 등)"""

    def __init__(self, attribute: str, value):
        self.attribute = attribute
        self.value = value
        super().__init__(f"잘못된 능력치 값입니다: {attribute}={value}")


class InvalidStatError(IdleRPGError):
    """강화할 수 없는 스탯"""

    def __init__(self, stat_name: str):
        self.stat_name = stat_name
        super().__init__(f"강화할 수 없는 스탯입니다: {stat_name}")


class InvalidLevelError(IdleRPGError):
    """범위를 벗어난 스탯 레벨"""

    def __init__(self, level: int):
        self.level = level
        super().__init__(f"스탯 레벨은 1 이상이어야 합니다: {level}")


# =============================================================================
# 스테이지/몬스터 관련 예외
# =============================================================================


class InvalidStageError(IdleRPGError):
    """범위를 벗어난 스테이지 또는 진행도"""

    def __init__(self, stage: int, progress: int | None = None):
        self.stage = stage
        self.progress = progress
        if progress is None:
            super().__init__(f"스테이지는 1 이상이어야 합니다: {stage}")
        else:
            super().__init__(f"잘못된 스테이지 진행도입니다: stage={stage}, progress={progress}")


class MonsterTemplateCorruptedError(IdleRPGError):
    """몬스터 템플릿 테이블 조회 실패 (생성기 내부에서 복구됨)"""

    def __init__(self, group_index: int, role: str):
        self.group_index = group_index
        self.role = role
        super().__init__(f"몬스터 템플릿을 찾을 수 없습니다: group={group_index}, role={role}")


# =============================================================================
# 세션 관련 예외
# =============================================================================


class SessionLimitError(IdleRPGError):
    """동시 자동 전투 세션 수 초과"""

    def __init__(self, max_sessions: int):
        self.max_sessions = max_sessions
        super().__init__(f"자동 전투 인원이 가득 찼습니다. (최대 {max_sessions}명)")
