"""
Tests for the ListEntriesUseCase.
"""

from unittest.mock import MagicMock

import pytest

from file_manager.entities.entry import Entry
from file_manager.exceptions import FileRepositoryError, NotFoundError
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.use_cases.files.list_entries import ListEntriesUseCase


class TestListEntriesUseCase:
    """Test cases for the ListEntriesUseCase."""

    def test_execute_sorts_directories_and_files_together(self, cursor, mock_logger):
        """Entries are interleaved by name, not grouped by type."""
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.list_entries.return_value = [
            Entry("zeta.txt", "file"),
            Entry("beta", "directory"),
            Entry("alpha.txt", "file"),
            Entry("Gamma", "directory"),
        ]

        use_case = ListEntriesUseCase(mock_repository, mock_logger)
        result = use_case.execute(cursor)

        assert [e.name for e in result] == ["alpha.txt", "beta", "Gamma", "zeta.txt"]
        mock_repository.list_entries.assert_called_once_with(cursor.path)
        mock_logger.info.assert_any_call(f"Listing entries in directory: {cursor.path}")
        mock_logger.info.assert_any_call("Found 4 entries")

    def test_execute_lowercase_first_on_case_only_ties(self, cursor, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.list_entries.return_value = [
            Entry("Readme", "file"),
            Entry("b", "file"),
            Entry("readme", "file"),
            Entry("B", "directory"),
        ]

        result = ListEntriesUseCase(mock_repository, mock_logger).execute(cursor)

        assert [e.name for e in result] == ["b", "B", "readme", "Readme"]

    def test_execute_empty_directory(self, cursor, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.list_entries.return_value = []

        use_case = ListEntriesUseCase(mock_repository, mock_logger)

        assert use_case.execute(cursor) == []
        mock_logger.info.assert_any_call("Found 0 entries")

    def test_execute_repository_error(self, cursor, mock_logger):
        """Repository errors are re-raised as they are."""
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.list_entries.side_effect = NotFoundError("Directory not found")

        use_case = ListEntriesUseCase(mock_repository, mock_logger)

        with pytest.raises(NotFoundError, match="Directory not found"):
            use_case.execute(cursor)
        mock_logger.error.assert_not_called()

    def test_execute_unexpected_error(self, cursor, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.list_entries.side_effect = Exception("Unexpected error")

        use_case = ListEntriesUseCase(mock_repository, mock_logger)

        with pytest.raises(
            FileRepositoryError,
            match=f"Failed to list entries in {cursor.path}: Unexpected error",
        ):
            use_case.execute(cursor)
        mock_logger.error.assert_called_once_with("Error listing entries: Unexpected error")

    def test_initialization_without_logger(self):
        mock_repository = MagicMock(spec=FileRepositoryPort)

        use_case = ListEntriesUseCase(mock_repository)

        assert use_case._logger is not None
        assert use_case._file_repository == mock_repository
