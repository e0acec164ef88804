from unittest.mock import MagicMock, patch

from dockpilot.cli.commands.ps import ps
from dockpilot.models.container import ContainerRecord, PortMapping
from dockpilot.services.exceptions import DockerServiceError


def _records():
    return [
        ContainerRecord(id="abc123def4567890", names=("/web1",), image="nginx", state="running",
                        status="Up 2 minutes", ports=(PortMapping(private_port=80, public_port=8080),)),
        ContainerRecord(id="def456abc1237890", names=("/db",), image="postgres", state="exited",
                        status="Exited (0) 1 hour ago"),
    ]


class TestPsCommand:
    """Smoke tests for ps command."""

    @patch('dockpilot.cli.commands.ps.get_control_plane')
    def test_ps_lists_all(self, mock_get_plane, cli_runner):
        plane = MagicMock()
        plane.list_containers.return_value = _records()
        mock_get_plane.return_value = plane

        result = cli_runner.invoke(ps, [])

        assert result.exit_code == 0
        assert "web1" in result.output
        assert "db" in result.output
        assert "8080->80/tcp" in result.output
        plane.close.assert_called_once()

    @patch('dockpilot.cli.commands.ps.get_control_plane')
    def test_ps_running_only(self, mock_get_plane, cli_runner):
        plane = MagicMock()
        plane.list_containers.return_value = _records()
        mock_get_plane.return_value = plane

        result = cli_runner.invoke(ps, ['--running'])

        assert result.exit_code == 0
        assert "web1" in result.output
        assert "postgres" not in result.output

    @patch('dockpilot.cli.commands.ps.get_control_plane')
    def test_ps_quiet(self, mock_get_plane, cli_runner):
        plane = MagicMock()
        plane.list_containers.return_value = _records()
        mock_get_plane.return_value = plane

        result = cli_runner.invoke(ps, ['-q'])

        assert result.exit_code == 0
        assert result.output.split() == ["abc123def456", "def456abc123"]

    @patch('dockpilot.cli.commands.ps.get_control_plane')
    def test_ps_empty(self, mock_get_plane, cli_runner):
        plane = MagicMock()
        plane.list_containers.return_value = []
        mock_get_plane.return_value = plane

        result = cli_runner.invoke(ps, [])

        assert result.exit_code == 0
        assert "No containers found" in result.output

    @patch('dockpilot.cli.commands.ps.get_control_plane')
    def test_ps_docker_error(self, mock_get_plane, cli_runner):
        plane = MagicMock()
        plane.list_containers.side_effect = DockerServiceError("Failed to list containers: boom")
        mock_get_plane.return_value = plane

        result = cli_runner.invoke(ps, [])

        assert result.exit_code == 1
        assert "Failed to list containers: boom" in result.output
