import pytest
from click.testing import CliRunner

from ipnav.cli import main
from ipnav.logging_config import setup_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    """Drop handlers bound to CliRunner streams once a test finishes."""
    yield
    setup_logging(level="WARNING", enable_console=False)


@pytest.fixture
def run():
    """Invoke the ipnav CLI with colour disabled and a clean environment."""
    runner = CliRunner()

    def invoke(*args, env=None):
        environment = {
            "NO_COLOR": "1",
            "IPNAV_PLAIN": None,
            "IPNAV_RANGE_LIMIT": None,
            "IPNAV_MAX_STEP_COUNT": None,
            "IPNAV_LOG_LEVEL": None,
        }
        environment.update(env or {})
        return runner.invoke(main, list(args), env=environment)

    return invoke
