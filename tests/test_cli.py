"""Tests for the SFC command-line interface."""

import tempfile
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from sfc.cli import main
from sfc.config import load_settings
from sfc.services import build_services
from sfc.storage import InMemoryFeedbackStore

SAFE_TEXT = "This product is wonderful and exceeded expectations"
UNSAFE_TEXT = "Fix this or I will kill you"


@pytest.fixture
def services():
    settings = load_settings()
    return build_services(settings, store=InMemoryFeedbackStore())


def _invoke(services, *args):
    return CliRunner().invoke(main, list(args), obj={"services": services})


def test_submit_safe_feedback(services):
    result = _invoke(services, "submit", SAFE_TEXT)
    assert result.exit_code == 0
    assert "Thank you" in result.output
    assert len(services.pipeline.list_approved()) == 1


def test_submit_unsafe_feedback_goes_to_review(services):
    result = _invoke(services, "submit", UNSAFE_TEXT)
    assert result.exit_code == 0
    assert "requires review" in result.output
    assert services.review.pending_count() == 1


def test_submit_too_short(services):
    result = _invoke(services, "submit", "meh")
    assert result.exit_code == 1
    assert services.store.list_all() == []


def test_list_and_show(services):
    record = services.pipeline.submit(SAFE_TEXT)

    listed = _invoke(services, "list")
    assert listed.exit_code == 0
    assert record.id[:8] in listed.output

    shown = _invoke(services, "show", record.id)
    assert shown.exit_code == 0
    assert "Positive" in shown.output


def test_list_hides_pending_unless_all(services):
    held = services.pipeline.submit(UNSAFE_TEXT)
    assert held.id[:8] not in _invoke(services, "list").output
    assert held.id[:8] in _invoke(services, "list", "--all").output


def test_show_missing(services):
    result = _invoke(services, "show", "missing-id")
    assert result.exit_code == 1
    assert "not found" in result.output


def test_approve_flow(services):
    held = services.pipeline.submit(UNSAFE_TEXT)

    pending = _invoke(services, "pending")
    assert held.id[:8] in pending.output

    approved = _invoke(services, "approve", held.id, "--notes", "context is a joke")
    assert approved.exit_code == 0
    assert "approved successfully" in approved.output
    record = services.pipeline.get(held.id)
    assert record.is_approved is True
    assert record.review_notes == "context is a joke"
    assert record.sentiment_category is not None

    again = _invoke(services, "approve", held.id)
    assert "already approved" in again.output


def test_reject_flow(services):
    held = services.pipeline.submit(UNSAFE_TEXT)

    rejected = _invoke(services, "reject", held.id, "-n", "threat")
    assert rejected.exit_code == 0
    assert "rejected successfully" in rejected.output
    assert held.id[:8] in _invoke(services, "rejected").output
    assert "Review queue is empty" in _invoke(services, "pending").output


def test_approve_missing(services):
    result = _invoke(services, "approve", "missing-id")
    assert result.exit_code == 1
    assert "not found" in result.output


def test_dashboard(services):
    services.pipeline.submit(SAFE_TEXT)
    result = _invoke(services, "dashboard")
    assert result.exit_code == 0
    assert "Total: 1" in result.output
    assert "English" in result.output


def test_check_config_ok():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "sfc.yaml"
        path.write_text(yaml.safe_dump({
            "storage": {"backend": "memory"},
            "content_safety": {"provider": "anthropic"},
            "anthropic": {"api_key": "sk-secret"},
        }))
        result = CliRunner().invoke(main, ["--config", str(path), "check-config"])

    assert result.exit_code == 0
    assert "Configuration OK" in result.output
    assert "sk-secret" not in result.output


def test_missing_configuration_exits_with_status_2():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "sfc.yaml"
        path.write_text(yaml.safe_dump({"content_safety": {"provider": "anthropic"}}))
        result = CliRunner().invoke(
            main, ["--config", str(path), "pending"], env={"SFC_ANTHROPIC__API_KEY": ""}
        )

    assert result.exit_code == 2
    assert "anthropic:api_key" in result.output
