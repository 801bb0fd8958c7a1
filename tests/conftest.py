"""
pytest 설정 및 공통 픽스처 정의
"""
import random
import sys
from pathlib import Path
from typing import AsyncGenerator

import pytest

# 프로젝트 루트를 Python 경로에 추가
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# =============================================================================
# pytest 설정
# =============================================================================


def pytest_configure(config):
    """pytest 설정"""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


# =============================================================================
# 데이터베이스 픽스처
# =============================================================================


@pytest.fixture(scope="function")
async def test_db() -> AsyncGenerator[None, None]:
    """
    테스트용 인메모리 SQLite 데이터베이스
    각 테스트 함수마다 새로운 DB 생성
    """
    from tortoise import Tortoise

    await Tortoise.init(
        db_url="sqlite://:memory:",
        modules={"models": ["models"]}
    )
    await Tortoise.generate_schemas()

    yield

    await Tortoise.close_connections()


# =============================================================================
# 세션 픽스처
# =============================================================================


@pytest.fixture(autouse=True)
def reset_sessions():
    """테스트마다 세션/락 저장소 초기화 (락은 이벤트 루프에 묶이므로 공유 금지)"""
    from service.session import active_sessions, character_locks, lock_holders

    active_sessions.clear()
    character_locks.clear()
    lock_holders.clear()
    yield
    active_sessions.clear()
    character_locks.clear()
    lock_holders.clear()


# =============================================================================
# 게임 엔티티 팩토리 픽스처
# =============================================================================


@pytest.fixture
def character_factory():
    """테스트용 Character 객체 생성 팩토리 (DB 저장 없음)"""
    from models.character import Character
    from service.player.stat_model import apply_derived_stats

    def _create_character(
        user_id: str = "123456789",
        strength: int = 1,
        dexterity: int = 1,
        gold: int = 10,
        current_stage: int = 1,
        stage_progress: int = 0,
    ) -> Character:
        character = Character(
            user_id=user_id,
            strength=strength,
            dexterity=dexterity,
            gold=gold,
            current_stage=current_stage,
            stage_progress=stage_progress,
        )
        apply_derived_stats(character)
        return character

    return _create_character


@pytest.fixture
def test_character(character_factory):
    """기본 테스트 캐릭터 (힘 1, 민첩 1, 골드 10, 스테이지 1)"""
    return character_factory()


@pytest.fixture
def seeded_rng() -> random.Random:
    """고정 시드 난수 생성기"""
    return random.Random(1234)


class FixedRoll:
    """random()이 항상 같은 값을 반환하는 난수 생성기"""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def no_evade_rng() -> FixedRoll:
    """회피 판정이 항상 실패하는 난수 생성기"""
    return FixedRoll(1.0)


@pytest.fixture
def always_evade_rng() -> FixedRoll:
    """회피 판정이 항상 성공하는 난수 생성기"""
    return FixedRoll(0.0)
