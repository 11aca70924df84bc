import pytest

from challenge import run_challenge as cli
from challenge.runner import RunOutcome, SubmissionError


@pytest.fixture
def env_file(tmp_path, monkeypatch):
    for key in ("CHALLENGE_BASE_URL", "CHALLENGE_NAME", "CHALLENGE_REG_NO",
                "CHALLENGE_EMAIL", "CHALLENGE_TIMEOUT_SEC"):
        monkeypatch.delenv(key, raising=False)
    path = tmp_path / ".env"
    path.write_text(
        "CHALLENGE_BASE_URL=https://api.test\n"
        "CHALLENGE_NAME=John\n"
        "CHALLENGE_REG_NO=REG12347\n"
        "CHALLENGE_EMAIL=john@example.com\n",
        encoding="utf-8",
    )
    return str(path)


class StubRunner:
    outcome = RunOutcome(ok=True, response_body="ok")

    def __init__(self, settings, client):
        self.client = client

    def run(self):
        return self.outcome


def test_dry_run_makes_no_http_client(env_file, monkeypatch):
    def boom(settings):
        raise AssertionError("no client expected in dry run")

    monkeypatch.setattr(cli, "HttpClient", boom)
    assert cli.run_challenge(["--env-file", env_file, "--dry-run"]) == 0


def test_successful_run_exits_zero_and_closes_client(env_file, monkeypatch):
    closed = []

    class Client:
        def __init__(self, settings):
            pass

        def close(self):
            closed.append(True)

    monkeypatch.setattr(cli, "HttpClient", Client)
    monkeypatch.setattr(cli, "ChallengeRunner", StubRunner)

    assert cli.run_challenge(["--env-file", env_file]) == 0
    assert closed == [True]


def test_failed_run_exits_one(env_file, monkeypatch):
    class FailingRunner(StubRunner):
        outcome = RunOutcome(ok=False, error=SubmissionError("denied", status_code=403))

    monkeypatch.setattr(cli, "HttpClient", lambda settings: None)
    monkeypatch.setattr(cli, "ChallengeRunner", FailingRunner)
    assert cli.run_challenge(["--env-file", env_file]) == 1


def test_configuration_error_exits_one(tmp_path, monkeypatch):
    for key in ("CHALLENGE_BASE_URL", "CHALLENGE_NAME", "CHALLENGE_REG_NO", "CHALLENGE_EMAIL"):
        monkeypatch.delenv(key, raising=False)
    assert cli.run_challenge(["--env-file", str(tmp_path / "none.env")]) == 1
