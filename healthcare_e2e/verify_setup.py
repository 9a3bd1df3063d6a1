#!/usr/bin/env python3
"""
Setup Verification

Checks that the local environment is ready to run the E2E suites.

Usage:
    verify-setup [--root PATH] [--check-network] [--no-color]
    python3 -m healthcare_e2e.verify_setup

Run it from the project checkout, or point --root at one. Exit code is 0
when every required check passes, 1 otherwise.
"""

import argparse
import importlib.util
import os
import subprocess
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import requests

from .config import get_app_config

MIN_PYTHON = (3, 9)

REQUIRED_MODULES: List[Tuple[str, str]] = [
    ("playwright", "playwright"),
    ("pytest", "pytest"),
    ("pytest_playwright", "pytest-playwright"),
    ("requests", "requests"),
    ("yaml", "PyYAML"),
]

CONFIG_FILES = [
    ("pyproject.toml", "pyproject.toml"),
    (".gitignore", ".gitignore"),
]

TEST_FILES = [
    ("tests/e2e/ui/test_login.py", "Login tests"),
    ("tests/e2e/ui/test_appointment.py", "Appointment tests"),
    ("tests/e2e/ui/test_logout.py", "Logout tests"),
    ("tests/e2e/shop/test_shop_login.py", "Shop login tests"),
    ("tests/e2e/shop/test_shop_checkout.py", "Shop checkout tests"),
    ("tests/e2e/shop/test_shop_logout.py", "Shop logout tests"),
    ("tests/e2e/api/test_patient_api.py", "Patient API tests"),
]

LIBRARY_FILES = [
    ("healthcare_e2e/helpers/__init__.py", "Test helpers"),
    ("healthcare_e2e/config/__init__.py", "Test configuration"),
    ("healthcare_e2e/pages/__init__.py", "Page objects"),
]

DOC_FILES = [
    ("README.md", "README.md"),
]

TEST_DIRECTORIES = [
    ("tests", "tests directory"),
    ("tests/e2e/ui", "UI tests directory"),
    ("tests/e2e/shop", "Shop tests directory"),
    ("tests/e2e/api", "API tests directory"),
]


class Colors:
    """Terminal colors."""

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    END = "\033[0m"

    enabled = True


def color(text: str, c: str) -> str:
    """Apply color to text."""
    if not Colors.enabled:
        return text
    return f"{c}{text}{Colors.END}"


def print_header(text: str) -> None:
    """Print a section header."""
    print(f"\n{color(text, Colors.BOLD + Colors.BLUE)}")


def print_result(ok: bool, text: str) -> None:
    """Print a pass/fail line."""
    if ok:
        print(color(f"  [OK] {text}", Colors.GREEN))
    else:
        print(color(f"  [FAIL] {text}", Colors.RED))


def print_warning(text: str) -> None:
    """Print warning message."""
    print(color(f"  [WARN] {text}", Colors.YELLOW))


def print_info(text: str) -> None:
    """Print info message."""
    print(color(f"  [INFO] {text}", Colors.CYAN))


# =============================================================================
# Checks
# =============================================================================


def check_python_version(minimum: Tuple[int, int] = MIN_PYTHON) -> bool:
    """Check the running interpreter is new enough."""
    ok = sys.version_info[:2] >= minimum
    version = ".".join(str(v) for v in sys.version_info[:3])
    print_result(ok, f"Python {version} (>= {minimum[0]}.{minimum[1]} required)")
    return ok


def check_command(command: List[str], description: str) -> bool:
    """Check a command runs and exits 0 with --version."""
    try:
        subprocess.run(
            [*command, "--version"],
            capture_output=True,
            timeout=30,
            check=True,
        )
        ok = True
    except (subprocess.SubprocessError, FileNotFoundError, OSError):
        ok = False
    print_result(ok, description)
    return ok


def check_module(module: str, package: str) -> bool:
    """Check a module is importable without importing it."""
    try:
        ok = importlib.util.find_spec(module) is not None
    except (ImportError, ValueError):
        ok = False
    print_result(ok, f"{package} installed")
    if not ok:
        print_warning(f"Run: pip install {package}")
    return ok


def check_file(root: Path, relative: str, description: str) -> bool:
    """Check a file exists under root."""
    ok = (root / relative).is_file()
    print_result(ok, description)
    return ok


def check_directory(root: Path, relative: str, description: str) -> bool:
    """Check a directory exists under root."""
    ok = (root / relative).is_dir()
    print_result(ok, f"{description} ({relative})")
    return ok


def check_files(root: Path, entries: Iterable[Tuple[str, str]]) -> bool:
    """Run check_file for every entry; every check is printed."""
    results = [check_file(root, path, description) for path, description in entries]
    return all(results)


def check_directories(root: Path, entries: Iterable[Tuple[str, str]]) -> bool:
    """Run check_directory for every entry; every check is printed."""
    results = [check_directory(root, path, description) for path, description in entries]
    return all(results)


def browsers_path() -> Path:
    """Directory where Playwright installs its browsers."""
    override = os.environ.get("PLAYWRIGHT_BROWSERS_PATH")
    if override and override != "0":
        return Path(override)
    if sys.platform == "win32":
        return Path(os.environ.get("LOCALAPPDATA", Path.home())) / "ms-playwright"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Caches" / "ms-playwright"
    return Path.home() / ".cache" / "ms-playwright"


def check_browsers(browser: str = "chromium") -> bool:
    """Report whether a Playwright browser build is installed. Informational only."""
    path = browsers_path()
    found = path.is_dir() and any(path.glob(f"{browser}-*"))
    if found:
        print_result(True, f"Playwright {browser} installed ({path})")
    else:
        print_warning(f"Playwright {browser} not found in {path}")
        print_info(f"To install browsers: playwright install {browser}")
    return found


def check_url(url: str, timeout: float = 10.0) -> bool:
    """Check a URL answers with a non-5xx status."""
    try:
        response = requests.get(url, timeout=timeout)
        ok = response.status_code < 500
        detail = str(response.status_code)
    except requests.exceptions.RequestException as e:
        ok = False
        detail = type(e).__name__
    print_result(ok, f"{url} reachable ({detail})")
    return ok


def check_network() -> bool:
    """Check every target site and the API answer."""
    app_config = get_app_config()
    urls = [
        app_config["healthcare_app"]["base_url"],
        app_config["shop_app"]["base_url"],
        app_config["api"]["base_url"] + app_config["api"]["endpoints"]["users"],
    ]
    results = [check_url(url) for url in urls]
    return all(results)


# =============================================================================
# Main
# =============================================================================


def run_checks(root: Path, network: bool = False) -> bool:
    """Run every check against ``root`` and print the report. Returns overall status."""
    results = []

    print_header("1. Checking Runtime Environment...")
    results.append(check_python_version())
    results.append(check_command([sys.executable, "-m", "playwright"], "Playwright CLI available"))

    print_header("2. Checking Dependencies...")
    results.append(all([check_module(module, package) for module, package in REQUIRED_MODULES]))

    print_header("3. Checking Configuration Files...")
    results.append(check_files(root, CONFIG_FILES))

    print_header("4. Checking Test Files...")
    results.append(check_files(root, TEST_FILES))

    print_header("5. Checking Helper and Config Modules...")
    results.append(check_files(root, LIBRARY_FILES))

    print_header("6. Checking Documentation...")
    results.append(check_files(root, DOC_FILES))

    print_header("7. Checking Test Directory Structure...")
    results.append(check_directories(root, TEST_DIRECTORIES))

    print_header("8. Checking Playwright Browsers...")
    check_browsers()

    if network:
        print_header("9. Checking Target Sites...")
        results.append(check_network())

    return all(results)


def print_summary(passed: bool) -> None:
    """Print the closing summary and next steps."""
    print(color("\n" + "=" * 40, Colors.CYAN))
    if passed:
        print(color("All Checks Passed! Suite is ready.", Colors.GREEN))
        print(color("\nNext Steps:", Colors.BLUE))
        print(color("  1. Run offline tests: pytest tests/unit", Colors.CYAN))
        print(color("  2. Run live suites: RUN_E2E_TESTS=1 pytest tests/e2e", Colors.CYAN))
    else:
        print(color("Some Checks Failed! See above for details.", Colors.RED))
        print(color("\nCommon Issues:", Colors.BLUE))
        print(color("  - Dependencies not installed: pip install -e .", Colors.YELLOW))
        print(color("  - Browsers not installed: playwright install", Colors.YELLOW))
        print(color("  - File missing: check project structure", Colors.YELLOW))
    print(color("=" * 40 + "\n", Colors.CYAN))


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point."""
    parser = argparse.ArgumentParser(
        description="Verify the E2E suite environment is ready",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=Path.cwd(),
        help="Project root to check (default: current directory)",
    )
    parser.add_argument(
        "--check-network",
        action="store_true",
        help="Also check the target sites are reachable",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    args = parser.parse_args(argv)

    Colors.enabled = not args.no_color and sys.stdout.isatty()

    print(color("\n" + "=" * 40, Colors.CYAN))
    print(color("Healthcare E2E Suite Setup Verification", Colors.BOLD + Colors.CYAN))
    print(color("=" * 40, Colors.CYAN))

    passed = run_checks(args.root.resolve(), network=args.check_network)
    print_summary(passed)

    return 0 if passed else 1


if __name__ == "__main__":
    sys.exit(main())
