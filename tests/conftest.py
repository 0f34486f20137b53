# tests/conftest.py
import pytest

# Sentences taken from typing-effect demos: plain Hangul, punctuation,
# compound finals, line breaks and mixed scripts.
SAMPLE_TEXTS = [
    "안녕하세요, 여기는 타이핑 효과 컴포넌트입니다.",
    "타이핑 효과를 일시정지하고 다시 시작합니다.",
    "커서가 깜빡이다가 타이핑이 종료되면 사라집니다.",
    "닭이 값을 읽고 앉아 있었다.",
    "Hello, 세계! 123",
    "각나다",
    "",
]


@pytest.fixture(params=SAMPLE_TEXTS)
def sample_text(request) -> str:
    return request.param


@pytest.fixture
def settings_path(tmp_path):
    """A settings.yaml path inside a temp dir so tests never touch the real file."""
    return tmp_path / "settings.yaml"
