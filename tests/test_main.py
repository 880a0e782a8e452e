"""Tests for the command line interface."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from jobspark.main import app
from jobspark.models.career import CareerProfile, JobPosting
from jobspark.models.cv import StructuredCV
from jobspark.output.pdf import GENERIC_FAILURE_MESSAGE

runner = CliRunner()


@pytest.fixture
def cv_file(tmp_path: Path, jane_doe_markdown: str) -> Path:
    path = tmp_path / "jane.md"
    path.write_text(jane_doe_markdown, encoding="utf-8")
    return path


@pytest.fixture
def profile_file(tmp_path: Path, sample_career_profile: CareerProfile) -> Path:
    path = tmp_path / "profile.json"
    path.write_text(sample_career_profile.model_dump_json(), encoding="utf-8")
    return path


@pytest.fixture
def jobs_file(tmp_path: Path, sample_jobs: list[JobPosting]) -> Path:
    path = tmp_path / "jobs.json"
    path.write_text(json.dumps([job.model_dump() for job in sample_jobs]), encoding="utf-8")
    return path


class TestParseCommand:
    """Tests for the parse command."""

    def test_json_output(self, cv_file: Path) -> None:
        result = runner.invoke(app, ["parse", str(cv_file), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["name"] == "Jane Doe"
        assert data["contact"] == "jane@x.com"
        assert [s["title"] for s in data["sections"]] == ["Experience", "Skills"]

    def test_table_output(self, cv_file: Path) -> None:
        result = runner.invoke(app, ["parse", str(cv_file)])

        assert result.exit_code == 0
        assert "Jane Doe" in result.stdout
        assert "2 sections" in result.stdout

    def test_saves_normalized_markdown(self, cv_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "out" / "jane.md"

        result = runner.invoke(app, ["parse", str(cv_file), "-o", str(output)])

        assert result.exit_code == 0
        assert "saved to:" in result.stdout
        assert output.read_text(encoding="utf-8") == (
            "# Jane Doe\n\n### jane@x.com\n\n## Experience\n\nSenior Engineer at Acme\n\n"
            "## Skills\n\n- Go\n- Rust\n"
        )

    def test_json_output_with_saved_markdown(self, cv_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "jane.md"

        result = runner.invoke(app, ["parse", str(cv_file), "--json", "-o", str(output)])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["name"] == "Jane Doe"
        assert output.read_text(encoding="utf-8").startswith("# Jane Doe\n")

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["parse", str(tmp_path / "missing.md")])

        assert result.exit_code == 1
        assert "File not found" in result.stdout


class TestPdfCommand:
    """Tests for the pdf command."""

    def test_exports_markdown_cv(self, cv_file: Path, tmp_path: Path) -> None:
        output_dir = tmp_path / "out"

        result = runner.invoke(app, ["pdf", str(cv_file), "-o", str(output_dir)])

        assert result.exit_code == 0
        assert (output_dir / "jane_doe_cv.pdf").read_bytes().startswith(b"%PDF")
        assert "Saved to:" in result.stdout

    def test_custom_title(self, cv_file: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["pdf", str(cv_file), "--title", "Backend Role", "-o", str(tmp_path)]
        )

        assert result.exit_code == 0
        assert (tmp_path / "backend_role.pdf").exists()

    def test_exports_structured_cv(
        self, tmp_path: Path, sample_structured_cv: StructuredCV
    ) -> None:
        source = tmp_path / "cv.json"
        source.write_text(sample_structured_cv.model_dump_json(), encoding="utf-8")

        result = runner.invoke(app, ["pdf", str(source), "-o", str(tmp_path)])

        assert result.exit_code == 0
        assert (tmp_path / "john_doe_cv.pdf").exists()

    def test_invalid_structured_cv(self, tmp_path: Path) -> None:
        source = tmp_path / "cv.json"
        source.write_text('{"experiences": [{"title": "Dev"}]}', encoding="utf-8")

        result = runner.invoke(app, ["pdf", str(source), "-o", str(tmp_path)])

        assert result.exit_code == 1
        assert "Invalid CV" in result.stdout

    def test_export_failure_shows_generic_message(self, cv_file: Path, tmp_path: Path) -> None:
        with patch("jobspark.main.export_cv_pdf", return_value=None):
            result = runner.invoke(app, ["pdf", str(cv_file), "-o", str(tmp_path)])

        assert result.exit_code == 1
        assert GENERIC_FAILURE_MESSAGE in result.stdout


class TestCreditsCommand:
    """Tests for the credits command."""

    def test_lists_packages_and_costs(self) -> None:
        result = runner.invoke(app, ["credits"])

        assert result.exit_code == 0
        for price in ("R15.00", "R50.00", "R100.00"):
            assert price in result.stdout
        assert "interview session: 30 credits" in result.stdout
        assert "cv generation: 15 credits" in result.stdout
        assert "Balance:" not in result.stdout

    def test_balance_check(self) -> None:
        result = runner.invoke(app, ["credits", "--balance", "20"])

        assert result.exit_code == 0
        assert "Balance: 20 credits" in result.stdout
        assert "interview session: 30 credits (not enough credits)" in result.stdout
        assert "cv generation: 15 credits (affordable)" in result.stdout


class TestScoreCommand:
    """Tests for the score command."""

    def test_json_report(self, profile_file: Path) -> None:
        result = runner.invoke(app, ["score", str(profile_file), "--json"])

        assert result.exit_code == 0
        report = json.loads(result.stdout)
        assert [c["name"] for c in report["categories"]] == [
            "Profile Completeness",
            "CV Quality",
            "Interview Readiness",
            "Market Alignment",
        ]
        assert report["categories"][0]["score"] == 100
        assert report["profile_completion"] == 100

    def test_table_report(self, profile_file: Path) -> None:
        result = runner.invoke(app, ["score", str(profile_file)])

        assert result.exit_code == 0
        assert "Career Score:" in result.stdout

    def test_invalid_profile(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.json"
        path.write_text("{not json", encoding="utf-8")

        result = runner.invoke(app, ["score", str(path)])

        assert result.exit_code == 1
        assert "Invalid profile" in result.stdout


class TestMatchCommand:
    """Tests for the match command."""

    def test_ranks_jobs(self, profile_file: Path, jobs_file: Path) -> None:
        result = runner.invoke(app, ["match", str(profile_file), str(jobs_file)])

        assert result.exit_code == 0
        assert "Top 3 of 3 jobs" in result.stdout
        assert result.stdout.index("Senior Python Developer") < result.stdout.index(
            "Data Analyst"
        )

    def test_limit(self, profile_file: Path, jobs_file: Path) -> None:
        result = runner.invoke(app, ["match", str(profile_file), str(jobs_file), "-n", "1"])

        assert result.exit_code == 0
        assert "Top 1 of 3 jobs" in result.stdout
        assert "100%" in result.stdout
        assert "Warehouse Supervisor" not in result.stdout

    def test_invalid_jobs_file(self, profile_file: Path, tmp_path: Path) -> None:
        path = tmp_path / "jobs.json"
        path.write_text('[{"company": "Acme"}]', encoding="utf-8")

        result = runner.invoke(app, ["match", str(profile_file), str(path)])

        assert result.exit_code == 1
        assert "Invalid jobs file" in result.stdout
