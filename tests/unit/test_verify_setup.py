"""
Unit tests for the setup verification CLI
"""
import subprocess
from unittest.mock import Mock, patch

import pytest
import requests

from healthcare_e2e import verify_setup
from healthcare_e2e.verify_setup import (
    CONFIG_FILES,
    DOC_FILES,
    LIBRARY_FILES,
    TEST_DIRECTORIES,
    TEST_FILES,
    check_browsers,
    check_command,
    check_directory,
    check_file,
    check_module,
    check_network,
    check_python_version,
    check_url,
    main,
)


@pytest.fixture
def project_root(tmp_path):
    """A directory holding every file and directory verify-setup expects"""
    for relative, _ in CONFIG_FILES + TEST_FILES + LIBRARY_FILES + DOC_FILES:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("")
    for relative, _ in TEST_DIRECTORIES:
        (tmp_path / relative).mkdir(parents=True, exist_ok=True)
    return tmp_path


class TestFileChecks:
    """Tests for file and directory checks"""

    def test_file_present(self, tmp_path, capsys):
        (tmp_path / "README.md").write_text("# x")

        assert check_file(tmp_path, "README.md", "README.md") is True
        assert "[OK] README.md" in capsys.readouterr().out

    def test_file_missing(self, tmp_path, capsys):
        assert check_file(tmp_path, "README.md", "README.md") is False
        assert "[FAIL] README.md" in capsys.readouterr().out

    def test_directory_is_not_a_file(self, tmp_path):
        (tmp_path / "tests").mkdir()

        assert check_file(tmp_path, "tests", "tests") is False
        assert check_directory(tmp_path, "tests", "tests directory") is True


class TestEnvironmentChecks:
    """Tests for interpreter, command and module checks"""

    def test_python_version(self):
        assert check_python_version((3, 0)) is True
        assert check_python_version((99, 0)) is False

    def test_command_ok(self):
        with patch("healthcare_e2e.verify_setup.subprocess.run") as mock_run:
            assert check_command(["playwright"], "Playwright CLI available") is True

        mock_run.assert_called_once()
        assert mock_run.call_args[0][0] == ["playwright", "--version"]

    def test_command_fails(self):
        error = subprocess.CalledProcessError(1, ["playwright", "--version"])
        with patch("healthcare_e2e.verify_setup.subprocess.run", side_effect=error):
            assert check_command(["playwright"], "Playwright CLI available") is False

    def test_command_not_found(self):
        with patch("healthcare_e2e.verify_setup.subprocess.run", side_effect=FileNotFoundError()):
            assert check_command(["nope"], "nope") is False

    def test_module_installed(self):
        assert check_module("pytest", "pytest") is True

    def test_module_missing(self, capsys):
        assert check_module("surely_not_an_installed_module", "not-a-package") is False
        assert "pip install not-a-package" in capsys.readouterr().out

    def test_browsers_found(self, tmp_path, monkeypatch):
        (tmp_path / "chromium-1091").mkdir()
        monkeypatch.setenv("PLAYWRIGHT_BROWSERS_PATH", str(tmp_path))

        assert check_browsers() is True

    def test_browsers_missing_is_a_warning(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("PLAYWRIGHT_BROWSERS_PATH", str(tmp_path))

        assert check_browsers() is False
        out = capsys.readouterr().out
        assert "[WARN]" in out
        assert "playwright install chromium" in out


class TestNetworkChecks:
    """Tests for URL reachability"""

    def test_url_ok(self):
        with patch("healthcare_e2e.verify_setup.requests.get", return_value=Mock(status_code=200)):
            assert check_url("https://www.saucedemo.com") is True

    def test_client_error_still_reachable(self):
        with patch("healthcare_e2e.verify_setup.requests.get", return_value=Mock(status_code=404)):
            assert check_url("https://example.com/missing") is True

    def test_server_error(self):
        with patch("healthcare_e2e.verify_setup.requests.get", return_value=Mock(status_code=503)):
            assert check_url("https://example.com") is False

    def test_connection_error(self, capsys):
        with patch(
            "healthcare_e2e.verify_setup.requests.get",
            side_effect=requests.exceptions.ConnectionError("refused"),
        ):
            assert check_url("https://example.com") is False
        assert "ConnectionError" in capsys.readouterr().out

    def test_check_network_uses_resolved_urls(self, monkeypatch):
        monkeypatch.setenv("API_BASE_URL", "http://localhost:3000")

        with patch("healthcare_e2e.verify_setup.requests.get", return_value=Mock(status_code=200)) as mock_get:
            assert check_network() is True

        urls = [c.args[0] for c in mock_get.call_args_list]
        assert urls == [
            "https://katalon-demo-cura.herokuapp.com",
            "https://www.saucedemo.com",
            "http://localhost:3000/users",
        ]


class TestMain:
    """Tests for the CLI entry point"""

    @pytest.fixture
    def passing_environment(self):
        with patch.object(verify_setup, "check_command", return_value=True), patch.object(
            verify_setup, "check_module", return_value=True
        ), patch.object(verify_setup, "check_browsers", return_value=False):
            yield

    def test_complete_project_passes(self, project_root, passing_environment, capsys):
        assert main(["--root", str(project_root), "--no-color"]) == 0
        assert "All Checks Passed!" in capsys.readouterr().out

    def test_missing_file_fails(self, project_root, passing_environment, capsys):
        (project_root / "README.md").unlink()

        assert main(["--root", str(project_root), "--no-color"]) == 1
        out = capsys.readouterr().out
        assert "[FAIL] README.md" in out
        assert "Some Checks Failed!" in out

    def test_missing_dependency_fails(self, project_root):
        with patch.object(verify_setup, "check_command", return_value=True), patch.object(
            verify_setup, "check_module", return_value=False
        ), patch.object(verify_setup, "check_browsers", return_value=True):
            assert main(["--root", str(project_root), "--no-color"]) == 1

    def test_network_only_when_requested(self, project_root, passing_environment):
        with patch.object(verify_setup, "check_network", return_value=False) as mock_network:
            assert main(["--root", str(project_root), "--no-color"]) == 0
            mock_network.assert_not_called()

            assert main(["--root", str(project_root), "--no-color", "--check-network"]) == 1
            mock_network.assert_called_once()

    def test_no_color_output_is_plain(self, project_root, passing_environment, capsys):
        main(["--root", str(project_root), "--no-color"])

        assert "\033[" not in capsys.readouterr().out

    def test_root_defaults_to_current_directory(self, project_root, passing_environment, monkeypatch):
        monkeypatch.chdir(project_root)

        assert main(["--no-color"]) == 0

    def test_root_default_does_not_follow_the_install(self, tmp_path, passing_environment, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)

        assert main(["--no-color"]) == 1
        assert "[FAIL] README.md" in capsys.readouterr().out

    def test_passing_summary_has_no_install_step(self, project_root, passing_environment, capsys):
        main(["--root", str(project_root), "--no-color"])

        out = capsys.readouterr().out
        assert "Next Steps:" in out
        assert "playwright install" not in out
