import pytest

from fromasync.helpers import materialize


@pytest.fixture
def lowered_ceiling(monkeypatch: pytest.MonkeyPatch) -> int:
    """
    Lower the element limit so that exceeding it does not require huge sources.
    """
    monkeypatch.setattr(materialize, "MAX_SAFE_INTEGER", 1)
    return 1
