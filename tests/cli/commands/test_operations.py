from unittest.mock import MagicMock, patch

import pytest

from dockpilot.cli.commands.operations import op, restart, rm, shell, start, stop, web
from dockpilot.models.container import ContainerRecord
from dockpilot.models.operation import OperationOutcome
from dockpilot.services.exceptions import ContainerNotFoundError


@pytest.fixture
def plane():
    mock_plane = MagicMock()
    mock_plane.resolve.return_value = ContainerRecord(id="abc123", names=("/web1",))
    mock_plane.execute.return_value = OperationOutcome.ok("Container started")
    return mock_plane


class TestOperationCommands:
    """Smoke tests for operation commands."""

    @patch('dockpilot.cli.commands.operations.get_control_plane')
    def test_op_command(self, mock_get_plane, plane, cli_runner):
        mock_get_plane.return_value = plane

        result = cli_runner.invoke(op, ['web1', 'start'])

        assert result.exit_code == 0
        assert "Container started" in result.output
        plane.execute.assert_called_once_with("abc123", "start")
        plane.close.assert_called_once()

    @pytest.mark.parametrize("command,operation", [
        (start, "start"),
        (stop, "stop"),
        (restart, "restart"),
        (rm, "delete"),
        (web, "open-web"),
        (shell, "open-shell"),
    ])
    @patch('dockpilot.cli.commands.operations.get_control_plane')
    def test_shortcuts(self, mock_get_plane, command, operation, plane, cli_runner):
        mock_get_plane.return_value = plane

        result = cli_runner.invoke(command, ['abc'])

        assert result.exit_code == 0
        plane.resolve.assert_called_once_with('abc')
        plane.execute.assert_called_once_with("abc123", operation)

    @patch('dockpilot.cli.commands.operations.get_control_plane')
    def test_failed_outcome_exits(self, mock_get_plane, plane, cli_runner):
        """Test a failed operation prints its message and exits 1."""
        plane.execute.return_value = OperationOutcome.failed("Cannot open web page: port not available")
        mock_get_plane.return_value = plane

        result = cli_runner.invoke(web, ['web1'])

        assert result.exit_code == 1
        assert "port not available" in result.output

    @patch('dockpilot.cli.commands.operations.get_control_plane')
    def test_invalid_operation(self, mock_get_plane, plane, cli_runner):
        plane.execute.return_value = OperationOutcome.failed("Invalid operation type")
        mock_get_plane.return_value = plane

        result = cli_runner.invoke(op, ['web1', 'explode'])

        assert result.exit_code == 1
        assert "Invalid operation type" in result.output

    @patch('dockpilot.cli.commands.operations.get_control_plane')
    def test_unknown_container(self, mock_get_plane, plane, cli_runner):
        plane.resolve.side_effect = ContainerNotFoundError("Container 'zzz' not found")
        mock_get_plane.return_value = plane

        result = cli_runner.invoke(stop, ['zzz'])

        assert result.exit_code == 1
        assert "Container 'zzz' not found" in result.output
        plane.execute.assert_not_called()
