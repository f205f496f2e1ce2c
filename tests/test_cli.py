"""
Tests for the command-line runner.
"""

import json

import pytest
import requests

from jobmatch import cli


@pytest.fixture
def profile_file(tmp_path):
    path = tmp_path / "profile.yaml"
    path.write_text(
        "name: Asha\n"
        "skills: [React, TypeScript]\n"
        "preferred_work_modes: [remote]\n"
        "preferred_locations: [Remote]\n"
        "preferred_experience_level: mid\n"
    )
    return path


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "jobs.json"
    path.write_text(json.dumps([
        {"id": "low", "title": "Analyst", "workMode": "onsite"},
        {
            "id": "high", "title": "Frontend Engineer", "company": "Inclusion Labs",
            "skillsRequired": ["React", "TypeScript", "ARIA"], "workMode": "remote",
            "location": "Remote", "experienceLevel": "mid", "type": "full-time",
        },
    ]))
    return path


class TestCli:
    def test_json_output(self, profile_file, catalog_file, capsys):
        code = cli.main(["--profile", str(profile_file), "--catalog", str(catalog_file), "--json"])
        assert code == cli.EXIT_OK
        entries = json.loads(capsys.readouterr().out)
        assert [e["id"] for e in entries] == ["high", "low"]
        assert entries[0]["matchScore"] == 57
        assert entries[1]["matchScore"] == 0

    def test_text_output_and_limit(self, profile_file, catalog_file, capsys):
        code = cli.main(["--profile", str(profile_file), "--catalog", str(catalog_file), "--limit", "1"])
        assert code == cli.EXIT_OK
        out = capsys.readouterr().out.strip().splitlines()
        assert len(out) == 1
        assert "57%" in out[0]
        assert "Frontend Engineer @ Inclusion Labs" in out[0]

    def test_report_written(self, profile_file, catalog_file, monkeypatch, tmp_path):
        written = {}

        def fake_write(content):
            written["content"] = content
            return tmp_path / "matches.md"

        monkeypatch.setattr(cli, "write_report", fake_write)
        code = cli.main(["--profile", str(profile_file), "--catalog", str(catalog_file), "--report"])
        assert code == cli.EXIT_OK
        assert "Frontend Engineer" in written["content"]

    def test_missing_profile(self, tmp_path, catalog_file):
        code = cli.main(["--profile", str(tmp_path / "none.yaml"), "--catalog", str(catalog_file)])
        assert code == cli.EXIT_PROFILE

    def test_bad_catalog(self, profile_file, tmp_path):
        code = cli.main(["--profile", str(profile_file), "--catalog", str(tmp_path / "none.json")])
        assert code == cli.EXIT_CATALOG

    def test_sample_catalog_when_unconfigured(self, profile_file, monkeypatch, capsys):
        for key in ("JOBS_API_URL", "JOBS_CATALOG_PATH"):
            monkeypatch.delenv(key, raising=False)
        code = cli.main(["--profile", str(profile_file), "--json"])
        assert code == cli.EXIT_OK
        entries = json.loads(capsys.readouterr().out)
        assert len(entries) == 5

    def test_negative_limit_rejected(self, profile_file):
        with pytest.raises(SystemExit):
            cli.main(["--profile", str(profile_file), "--limit", "-1"])

    def test_bad_api_timeout_env_does_not_crash(self, profile_file, monkeypatch, capsys):
        seen = {}

        class _Response:
            status_code = 200

            def json(self):
                return {"status": "success", "data": [{"id": "api-job", "workMode": "remote"}]}

            def raise_for_status(self):
                pass

        def fake_get(url, params=None, headers=None, timeout=None):
            seen["timeout"] = timeout
            return _Response()

        monkeypatch.setenv("JOBS_API_URL", "http://jobs.local")
        monkeypatch.setenv("JOBS_API_TIMEOUT", "fast")
        monkeypatch.setattr(requests, "get", fake_get)

        code = cli.main(["--profile", str(profile_file), "--json"])
        assert code == cli.EXIT_OK
        assert seen["timeout"] == 15.0
        entries = json.loads(capsys.readouterr().out)
        assert [e["id"] for e in entries] == ["api-job"]
