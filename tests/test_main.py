from __future__ import annotations

import anyio
import pytest

from changed_files.main import run_action


def test_run_action_reports_missing_config(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = anyio.run(run_action, {})
    assert exit_code == 1
    assert "::error::Missing required env vars: INPUT_TOKEN" in capsys.readouterr().out
