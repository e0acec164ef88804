import pytest
from click.testing import CliRunner
from unittest.mock import Mock, MagicMock
import tempfile
from pathlib import Path


def _container_attrs(container_id="abc123", names=("/web1",), ports=None,
                     state="running", status="Up 2 minutes", image="nginx:latest"):
    """Build a Docker list descriptor like the daemon returns."""
    if ports is None:
        ports = [{"PrivatePort": 80, "PublicPort": 8080, "Type": "tcp", "IP": "0.0.0.0"}]
    return {
        "Id": container_id,
        "Names": list(names),
        "Image": image,
        "State": state,
        "Status": status,
        "Created": 1700000000,
        "Ports": ports,
    }


def _container(**kwargs):
    """Build a mock docker Container carrying list attrs."""
    container = Mock()
    container.attrs = _container_attrs(**kwargs)
    container.id = container.attrs["Id"]
    return container


@pytest.fixture
def make_attrs():
    """Factory for Docker container list descriptors."""
    return _container_attrs


@pytest.fixture
def make_container():
    """Factory for mock docker Containers."""
    return _container


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def mock_docker_client():
    """Provides a mocked Docker client."""
    mock_client = MagicMock()
    mock_client.ping.return_value = True
    mock_client.containers.list.return_value = []
    return mock_client


@pytest.fixture
def mock_runtime():
    """Provides a mocked runtime client holding one container, web1 (abc123)."""
    runtime = MagicMock()
    runtime.list_containers.return_value = [_container()]
    runtime.version.return_value = {
        "Version": "24.0.7",
        "ApiVersion": "1.43",
        "MinAPIVersion": "1.12",
        "GitCommit": "311b9ff",
        "GoVersion": "go1.20.10",
        "Os": "linux",
        "Arch": "amd64",
        "KernelVersion": "6.5.0",
        "Platform": {"Name": "Docker Engine - Community"},
    }
    return runtime


@pytest.fixture
def temp_config_dir():
    """Creates a temporary dockpilot data directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / ".dockpilot"


@pytest.fixture(autouse=True)
def isolated_data_dir(monkeypatch, tmp_path):
    """Keep tests away from the user's real configuration."""
    monkeypatch.setenv("DOCKPILOT_HOME", str(tmp_path / "dockpilot-home"))
    return tmp_path / "dockpilot-home"
