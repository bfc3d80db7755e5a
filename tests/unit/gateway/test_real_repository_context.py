"""Tests for RealRepositoryContext at the subprocess boundary."""

import json
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from prstatus.core.errors import NoActiveRepositoryError, ToolNotFoundError
from prstatus.core.types import ActiveRepository
from prstatus.gateway.repo_context.real import RealRepositoryContext

GH_PATH = "/usr/bin/gh"


def _completed(
    *, returncode: int, stdout: str = "", stderr: str = ""
) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class TestRealRepositoryContext:
    def test_resolves_working_directory_repository(self, tmp_path: Path) -> None:
        context = RealRepositoryContext(tmp_path)
        stdout = json.dumps({"nameWithOwner": "owner/repo", "pushedAt": "2024-01-15T10:00:00Z"})

        with (
            patch("prstatus.gateway.repo_context.real.shutil.which", return_value=GH_PATH),
            patch(
                "prstatus.gateway.repo_context.real.subprocess.run",
                return_value=_completed(returncode=0, stdout=stdout),
            ) as mock_run,
        ):
            active = context.get_active_repository(None)

        assert active == ActiveRepository(key="owner/repo", updated_at="2024-01-15T10:00:00Z")
        assert mock_run.call_args.args[0] == [
            GH_PATH,
            "repo",
            "view",
            "--json",
            "nameWithOwner,pushedAt",
        ]
        assert mock_run.call_args.kwargs["cwd"] == tmp_path

    def test_passes_explicit_repository(self, tmp_path: Path) -> None:
        context = RealRepositoryContext(tmp_path)
        stdout = json.dumps({"nameWithOwner": "other/repo", "pushedAt": "2024-02-01T00:00:00Z"})

        with (
            patch("prstatus.gateway.repo_context.real.shutil.which", return_value=GH_PATH),
            patch(
                "prstatus.gateway.repo_context.real.subprocess.run",
                return_value=_completed(returncode=0, stdout=stdout),
            ) as mock_run,
        ):
            active = context.get_active_repository("other/repo")

        assert active.key == "other/repo"
        assert mock_run.call_args.args[0][3] == "other/repo"

    def test_missing_pushed_at_is_empty(self, tmp_path: Path) -> None:
        context = RealRepositoryContext(tmp_path)
        stdout = json.dumps({"nameWithOwner": "owner/new", "pushedAt": None})

        with (
            patch("prstatus.gateway.repo_context.real.shutil.which", return_value=GH_PATH),
            patch(
                "prstatus.gateway.repo_context.real.subprocess.run",
                return_value=_completed(returncode=0, stdout=stdout),
            ),
        ):
            active = context.get_active_repository(None)

        assert active.updated_at == ""

    def test_missing_gh_raises_tool_not_found(self, tmp_path: Path) -> None:
        context = RealRepositoryContext(tmp_path)

        with patch("prstatus.gateway.repo_context.real.shutil.which", return_value=None):
            with pytest.raises(ToolNotFoundError):
                context.get_active_repository(None)

    def test_not_a_repository_raises(self, tmp_path: Path) -> None:
        context = RealRepositoryContext(tmp_path)
        stderr = "fatal: not a git repository (or any of the parent directories): .git\n"

        with (
            patch("prstatus.gateway.repo_context.real.shutil.which", return_value=GH_PATH),
            patch(
                "prstatus.gateway.repo_context.real.subprocess.run",
                return_value=_completed(returncode=1, stderr=stderr),
            ),
        ):
            with pytest.raises(NoActiveRepositoryError, match="not a git repository"):
                context.get_active_repository(None)

    @pytest.mark.parametrize(
        ("stdout", "match"),
        [
            ("{}", "repository name"),
            ("[]", "repository name"),
            (json.dumps({"nameWithOwner": 5}), "repository name"),
            (json.dumps({"nameWithOwner": "owner/repo", "pushedAt": 1}), "invalid pushedAt"),
        ],
    )
    def test_unexpected_output_raises(self, tmp_path: Path, stdout: str, match: str) -> None:
        context = RealRepositoryContext(tmp_path)

        with (
            patch("prstatus.gateway.repo_context.real.shutil.which", return_value=GH_PATH),
            patch(
                "prstatus.gateway.repo_context.real.subprocess.run",
                return_value=_completed(returncode=0, stdout=stdout),
            ),
        ):
            with pytest.raises(NoActiveRepositoryError, match=match):
                context.get_active_repository(None)
