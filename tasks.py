"""Invoke tasks for the image scanner - all tools run from local .venv."""

import os
import shutil
import sys
from pathlib import Path
from invoke import task, Context


def task_header(task_name: str, description: str, ctx: Context = None, **kwargs):
    """Print a standard header for invoke tasks.

    Args:
        task_name: Name of the task
        description: Brief description of what the task does
        ctx: Invoke context (unused, kept for a uniform signature)
        **kwargs: Task arguments to display
    """
    print("=" * 80)
    print(f"=== [{task_name}] {description}")
    print("=" * 80)

    cmd_parts = ["> invoke", task_name]
    for key, value in kwargs.items():
        if value is True:
            cmd_parts.append(f"--{key.replace('_', '-')}")
        elif value is not False and value is not None:
            cmd_parts.append(f"--{key.replace('_', '-')} {value}")

    print(" ".join(cmd_parts))
    print()


def get_venv_python():
    """Get the path to the virtual environment's python executable."""
    venv_path = Path(".venv")
    if os.name == "nt":  # Windows
        return venv_path / "Scripts" / "python.exe"
    return venv_path / "bin" / "python"


def ensure_venv(ctx):
    """Ensure virtual environment exists before running tasks."""
    if not Path(".venv").exists():
        print("Virtual environment not found. Run 'python -m venv .venv' and "
              "'.venv/bin/pip install -e .[dev]' first.")
        sys.exit(1)


@task
def clean(ctx):
    """Remove caches and coverage output."""
    task_header("clean", "Remove caches and coverage output", ctx)
    for pattern in ("__pycache__", ".pytest_cache", ".mypy_cache", "htmlcov", "*.egg-info"):
        for path in Path(".").rglob(pattern):
            if ".venv" in path.parts:
                continue
            if path.is_dir():
                shutil.rmtree(path, ignore_errors=True)
            else:
                path.unlink()
    coverage_file = Path(".coverage")
    if coverage_file.exists():
        coverage_file.unlink()
    print("✓ Cleanup completed!")


@task
def lint(ctx):
    """Run linting tools."""
    task_header("lint", "Run linting tools (black, flake8, mypy)", ctx)
    ensure_venv(ctx)
    python_path = get_venv_python()

    print("Running black...")
    ctx.run(f"{python_path} -m black --check src/ tests/ scripts/", warn=True)

    print("Running flake8...")
    ctx.run(f"{python_path} -m flake8 --max-line-length 100 src/ tests/ scripts/", warn=True)

    print("Running mypy...")
    ctx.run(f"{python_path} -m mypy src/", warn=True)


@task
def format(ctx):
    """Format code with black."""
    task_header("format", "Format code with black", ctx)
    ensure_venv(ctx)
    ctx.run(f"{get_venv_python()} -m black src/ tests/ scripts/")


@task
def test(ctx, coverage=True, verbose=False, test_path=""):
    """Run tests.

    Args:
        coverage: Generate coverage reports (disabled for specific tests)
        verbose: Run with verbose output
        test_path: Specific test file, class, or method to run

    Examples:
        inv test
        inv test --test-path="tests/test_scanner.py"
        inv test -t "tests/test_report.py::TestReportDirectories" --no-coverage
    """
    if test_path:
        task_header("test", f"Run specific test: {test_path}", ctx,
                    verbose=verbose, test_path=test_path)
        coverage = False
    else:
        task_header("test", "Run tests with coverage", ctx, coverage=coverage, verbose=verbose)

    ensure_venv(ctx)

    cmd = f"{get_venv_python()} -m pytest"
    if test_path:
        cmd += f" {test_path} -s"
    if coverage:
        cmd += " --cov=src --cov-report=html --cov-report=term"
    if verbose:
        cmd += " -v"

    ctx.run(cmd, pty=os.name != "nt")


@task
def scan(ctx, directory, verbose=False):
    """Run the image scanner against a directory.

    Examples:
        inv scan --directory /path/to/photos
    """
    task_header("scan", "Scan a directory for image files", ctx,
                directory=directory, verbose=verbose)
    ensure_venv(ctx)
    cmd = f'{get_venv_python()} scripts/scan_images.py "{directory}"'
    if verbose:
        cmd += " --verbose"
    ctx.run(cmd, pty=os.name != "nt")
