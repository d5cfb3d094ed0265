"""Unit tests for exporter utilities."""

import json

from xaffiliates.core.exporter import save_json, to_json
from xaffiliates.models import DashboardData, UserProfile

from conftest import make_user


def sample() -> DashboardData:
    return DashboardData(
        user=UserProfile.model_validate(make_user(affiliation={"user_id": ["777"]})),
        affiliates=[
            UserProfile.model_validate(make_user(user_id="1", username="bob")),
            UserProfile.model_validate(make_user(user_id="2", username="carol")),
        ],
        org_user_id="777",
    )


class TestToJson:
    def test_is_valid_json(self):
        parsed = json.loads(to_json(sample()))
        assert parsed["org_user_id"] == "777"
        assert [a["username"] for a in parsed["affiliates"]] == ["bob", "carol"]

    def test_has_expected_keys(self):
        parsed = json.loads(to_json(sample()))
        assert set(parsed) == {"user", "affiliates", "org_user_id", "affiliates_error"}
        assert parsed["user"]["affiliation"]["user_id"] == ["777"]


class TestSaveJson:
    def test_save_creates_parent_dirs(self, tmp_path):
        filepath = tmp_path / "nested" / "dir" / "team.json"
        result_path = save_json(sample(), filepath)
        assert filepath.exists()
        assert result_path == filepath

    def test_saved_file_matches_to_json(self, tmp_path):
        data = sample()
        filepath = save_json(data, tmp_path / "team.json")
        assert filepath.read_text(encoding="utf-8") == to_json(data)
