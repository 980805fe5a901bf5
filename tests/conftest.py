import pytest

from tests.fakes import SleepRecorder


@pytest.fixture
def sleeps(monkeypatch) -> SleepRecorder:
    """Replace the retry backoff sleep so tests never wait."""
    recorder = SleepRecorder()
    monkeypatch.setattr("src.retry.backoff_sleep", recorder)
    return recorder
