"""Tests for library log output."""

import os
import subprocess
import sys
import textwrap
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent.parent / "src"

REQUEST_SCRIPT = """
    from unittest.mock import Mock

    import requests

    from snoo.utils.reddit_client import RedditClient
    {setup}

    session = Mock(spec=requests.Session)
    session.headers = {{}}
    resp = Mock(spec=requests.Response)
    resp.content = b"{{}}"
    resp.json.return_value = {{}}
    session.post.return_value = resp

    RedditClient(session=session).post_form("api/hide", {{"id": "t3_a"}})
"""


def run_script(setup=""):
    """Run a request in a fresh interpreter so no other test's sinks apply."""
    env = {**os.environ, "PYTHONPATH": os.pathsep.join(filter(None, [str(SRC_DIR), os.environ.get("PYTHONPATH")]))}
    return subprocess.run(
        [sys.executable, "-c", textwrap.dedent(REQUEST_SCRIPT.format(setup=setup))],
        capture_output=True,
        text=True,
        env=env,
        timeout=60,
    )


def test_library_calls_log_nothing_by_default():
    result = run_script()

    assert result.returncode == 0, result.stderr
    assert result.stderr == ""


def test_setup_logging_turns_on_request_logs():
    result = run_script(
        "from snoo.utils.logging import setup_logging\n    setup_logging('DEBUG')"
    )

    assert result.returncode == 0, result.stderr
    assert "POST api/hide" in result.stderr
