"""Tests for the command-line interface - DashboardService is faked."""

import json

import pytest
from typer.testing import CliRunner

from xaffiliates import __version__
from xaffiliates.cli import app
from xaffiliates.exceptions import UpstreamError
from xaffiliates.models import DashboardData, UserProfile

from conftest import make_user

runner = CliRunner()


def dashboard(org_user_id: str | None = "777", affiliates=None, error=None) -> DashboardData:
    affiliation = {"description": "Acme", "user_id": [org_user_id]} if org_user_id else None
    return DashboardData(
        user=UserProfile.model_validate(make_user(affiliation=affiliation)),
        affiliates=affiliates or [],
        org_user_id=org_user_id,
        affiliates_error=error,
    )


class FakeService:
    """Stands in for DashboardService inside the CLI."""

    data: DashboardData | None = None
    error: Exception | None = None
    configs: list = []

    def __init__(self, config=None, client=None):
        FakeService.configs.append(config)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return None

    async def resolve(self, token):
        if self.error:
            raise self.error
        return self.data.user, self.data.org_user_id

    async def load(self, token):
        if self.error:
            raise self.error
        return self.data


@pytest.fixture
def fake_service(monkeypatch):
    FakeService.data = dashboard()
    FakeService.error = None
    FakeService.configs = []
    monkeypatch.setattr("xaffiliates.cli.DashboardService", FakeService)
    return FakeService


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestWhoami:
    def test_shows_profile(self, fake_service):
        result = runner.invoke(app, ["whoami", "--token", "tok"])
        assert result.exit_code == 0
        assert "@alice" in result.output
        assert "777" in result.output

    def test_token_from_env(self, fake_service, monkeypatch):
        monkeypatch.setenv("XAFFILIATES_TOKEN", "tok")
        result = runner.invoke(app, ["whoami"])
        assert result.exit_code == 0

    def test_upstream_failure(self, fake_service):
        fake_service.error = UpstreamError("Failed to get user: 401 nope", status_code=401)
        result = runner.invoke(app, ["whoami", "--token", "tok"])
        assert result.exit_code == 1
        assert "401" in result.output


class TestAffiliates:
    def test_lists_affiliates(self, fake_service):
        fake_service.data = dashboard(
            affiliates=[
                UserProfile.model_validate(make_user(user_id="1", username="bob", name="Bob")),
            ]
        )
        result = runner.invoke(app, ["affiliates", "--token", "tok"])
        assert result.exit_code == 0
        assert "@bob" in result.output
        assert "1 affiliates" in result.output

    def test_no_affiliation(self, fake_service):
        fake_service.data = dashboard(org_user_id=None)
        result = runner.invoke(app, ["affiliates", "--token", "tok"])
        assert result.exit_code == 1
        assert "no organization affiliation" in result.output

    def test_reports_listing_error(self, fake_service):
        fake_service.data = dashboard(error="Failed to get affiliates: 429 slow down")
        result = runner.invoke(app, ["affiliates", "--token", "tok"])
        assert result.exit_code == 0
        assert "429" in result.output

    def test_max_pages_passed_to_config(self, fake_service):
        runner.invoke(app, ["affiliates", "--token", "tok", "--max-pages", "4"])
        assert fake_service.configs[-1].max_affiliate_pages == 4

    def test_saves_output(self, fake_service, tmp_path):
        output = tmp_path / "team.json"
        result = runner.invoke(app, ["affiliates", "--token", "tok", "--output", str(output)])
        assert result.exit_code == 0
        assert json.loads(output.read_text())["org_user_id"] == "777"

    def test_json_output(self, fake_service):
        fake_service.data = dashboard(
            affiliates=[
                UserProfile.model_validate(make_user(user_id="1", username="bob", name="Bob")),
            ]
        )
        result = runner.invoke(app, ["affiliates", "--token", "tok", "--json"])
        assert result.exit_code == 0
        parsed = json.loads(result.output)
        assert parsed["org_user_id"] == "777"
        assert [a["username"] for a in parsed["affiliates"]] == ["bob"]

    def test_json_output_without_affiliation(self, fake_service):
        fake_service.data = dashboard(org_user_id=None)
        result = runner.invoke(app, ["affiliates", "--token", "tok", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["org_user_id"] is None
