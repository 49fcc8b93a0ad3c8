import pytest

import notmodified._digest


@pytest.fixture(autouse=True)
def reset_digest_provider(monkeypatch: pytest.MonkeyPatch) -> None:
    """Every test starts without a resolved process-wide digest provider."""
    monkeypatch.setattr(notmodified._digest, "_provider", None)
