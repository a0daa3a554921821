"""Basic application smoke tests."""

import runpy
from pathlib import Path

from fastapi.testclient import TestClient

from estimator.main import app


SCRIPT_PATH = Path(__file__).parent.parent / "scripts" / "generate_proposal.py"


def test_root_endpoint() -> None:
    """Root endpoint reports readiness."""
    with TestClient(app) as client:
        response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "message" in data


def test_generate_proposal_script(tmp_path: Path) -> None:
    """The command line script saves a proposal named after the school."""
    main = runpy.run_path(str(SCRIPT_PATH))["main"]

    exit_code = main(
        [
            "--school",
            "Pine Hill Academy",
            "--enrollment",
            "75",
            "--service",
            "studentAR",
            "--output-dir",
            str(tmp_path),
        ]
    )

    assert exit_code == 0
    saved = tmp_path / "Pine_Hill_Academy_Preliminary_Proposal.txt"
    assert "Monthly Service Fee: $3,120" in saved.read_text(encoding="utf-8")


def test_generate_proposal_script_unknown_service() -> None:
    """Unknown service keys stop the script with an error code."""
    main = runpy.run_path(str(SCRIPT_PATH))["main"]

    assert main(["--service", "ghost", "--stdout"]) == 2
