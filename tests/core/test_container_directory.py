import pytest
from unittest.mock import MagicMock

from dockpilot.core.container_directory import ContainerDirectory
from dockpilot.services.exceptions import DockerServiceError


class TestContainerDirectory:
    """Tests for ContainerDirectory."""

    def test_refresh_lists_all_containers(self, mock_runtime, make_container):
        """Test refresh includes stopped containers, in runtime order."""
        mock_runtime.list_containers.return_value = [
            make_container(container_id="abc123", names=("/web1",)),
            make_container(container_id="def456", names=("/db",), state="exited"),
        ]
        directory = ContainerDirectory(mock_runtime)

        snapshot = directory.refresh()

        mock_runtime.list_containers.assert_called_once_with(all=True)
        assert [r.id for r in snapshot] == ["abc123", "def456"]
        assert isinstance(snapshot, tuple)

    def test_refresh_propagates_connection_errors(self):
        """Test an unreachable runtime is not hidden behind an empty snapshot."""
        runtime = MagicMock()
        runtime.list_containers.side_effect = DockerServiceError("Docker daemon is not running")
        directory = ContainerDirectory(runtime)

        with pytest.raises(DockerServiceError):
            directory.refresh()

    def test_refresh_returns_new_snapshot(self, mock_runtime):
        """Test each refresh produces a new snapshot."""
        directory = ContainerDirectory(mock_runtime)

        first = directory.refresh()
        mock_runtime.list_containers.return_value = []
        second = directory.refresh()

        assert len(first) == 1
        assert second == ()

    def test_find(self, mock_runtime):
        directory = ContainerDirectory(mock_runtime)
        snapshot = directory.refresh()

        assert directory.find(snapshot, "abc123").name == "web1"

    def test_find_missing_returns_none(self, mock_runtime):
        """Test a lookup miss is a value, not an error."""
        directory = ContainerDirectory(mock_runtime)
        snapshot = directory.refresh()

        assert directory.find(snapshot, "missing") is None
        assert directory.find((), "abc123") is None

    def test_find_first_duplicate_wins(self, mock_runtime, make_container):
        """Test first-seen order breaks ties between duplicate ids."""
        mock_runtime.list_containers.return_value = [
            make_container(container_id="abc123", names=("/first",)),
            make_container(container_id="abc123", names=("/second",)),
        ]
        directory = ContainerDirectory(mock_runtime)

        assert directory.find(directory.refresh(), "abc123").name == "first"

    def test_find_requires_exact_id(self, mock_runtime):
        """Test find does not match prefixes."""
        directory = ContainerDirectory(mock_runtime)
        assert directory.find(directory.refresh(), "abc") is None

    def test_lookup_uses_fresh_snapshot(self, mock_runtime, make_container):
        """Test lookup sees containers created after an earlier refresh."""
        directory = ContainerDirectory(mock_runtime)
        assert directory.lookup("def456") is None

        mock_runtime.list_containers.return_value = [make_container(container_id="def456")]
        assert directory.lookup("def456").id == "def456"


class TestResolve:
    """Tests for resolving ids, names and short ids."""

    @pytest.fixture
    def snapshot(self, mock_runtime, make_container):
        mock_runtime.list_containers.return_value = [
            make_container(container_id="abc123def", names=("/web1",)),
            make_container(container_id="abd999", names=("/db",)),
        ]
        return ContainerDirectory(mock_runtime).refresh()

    def test_resolve_full_id(self, snapshot):
        assert ContainerDirectory.resolve(snapshot, "abd999").name == "db"

    @pytest.mark.parametrize("name", ["web1", "/web1"])
    def test_resolve_name(self, snapshot, name):
        assert ContainerDirectory.resolve(snapshot, name).id == "abc123def"

    def test_resolve_unique_prefix(self, snapshot):
        assert ContainerDirectory.resolve(snapshot, "abc").id == "abc123def"

    def test_resolve_ambiguous_prefix(self, snapshot):
        """Test a prefix shared by two containers resolves to nothing."""
        assert ContainerDirectory.resolve(snapshot, "ab") is None

    @pytest.mark.parametrize("reference", ["", "zzz"])
    def test_resolve_missing(self, snapshot, reference):
        assert ContainerDirectory.resolve(snapshot, reference) is None
