"""Shared test fixtures for dumpvalue.

Provides reusable fixtures for building configuration files, isolating
environment state, managing output state, and running CLI commands.
These fixtures are automatically discovered by pytest and available to
all test modules without explicit imports.
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from dumpvalue.models import NamedValue
from dumpvalue.output import OutputFormat, OutputManager, reset_output, set_output


SAMPLE_CONFIG = textwrap.dedent("""\
    <cruisecontrol>
      <!-- project plugins shown on the dashboard -->
      <projectPlugins>
        <plugin linkText="Build Report" linkUrl="ViewBuildReport.aspx" />
        <?ignore me?>
        <plugin linkText="Test Details" linkUrl="ViewTests.aspx" />
      </projectPlugins>
      <project name="demo">
        <tasks>
          <dumpValue>
            <xmlFileName>values.xml</xmlFileName>
            <dumpValueItems>
              <dumpValueItem name="MyValue" value="ValueContent" />
              <dumpValueItem name="MyValueNotInCDATA" value="some other content" valueInCDATA="false" />
            </dumpValueItems>
          </dumpValue>
        </tasks>
      </project>
    </cruisecontrol>
""")


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time. When Typer's CliRunner redirects those streams during
    a test, the cached references go stale once the test finishes.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration lookup and data files to a temporary directory.

    Points XDG_DATA_HOME below tmp_path, clears DUMPVALUE_CONFIG, and
    changes the working directory to tmp_path.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("DUMPVALUE_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def sample_config(tmp_path: Path) -> Path:
    """Write the sample CruiseControl configuration into tmp_path."""
    path = tmp_path / "ccnet.config"
    path.write_text(SAMPLE_CONFIG, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Value fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_values() -> list[NamedValue]:
    """The two values from the DumpValue documentation example."""
    return [
        NamedValue(name="MyValue", value="ValueContent"),
        NamedValue(
            name="MyValueNotInCDATA",
            value="some other content",
            literal_encoding=False,
        ),
    ]


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def quiet_output() -> OutputManager:
    """Install a quiet PLAIN-format output manager for the test."""
    output = OutputManager(format=OutputFormat.PLAIN, quiet=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
