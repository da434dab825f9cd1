"""Tests for the parameter management CLI."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from healthybot.exceptions import SecretResolutionError
from scripts.manage_parameters import cmd_check, cmd_put


@pytest.fixture
def mock_repo() -> MagicMock:
    """Create mock ParameterRepository."""
    repo = MagicMock()
    repo.put_value = AsyncMock(return_value=True)
    repo.get_value = AsyncMock(return_value="value")
    return repo


class TestCmdPut:
    """Tests for cmd_put command."""

    @pytest.mark.asyncio
    async def test_put_both(self, mock_repo, capsys) -> None:
        """Test storing both credentials."""
        exit_code = await cmd_put(
            "s3cr3t-value", "t0ken-value", False, repository=mock_repo
        )

        assert exit_code == 0
        mock_repo.put_value.assert_any_await(
            "HEALTHYBOT_CHANNEL_SECRET", "s3cr3t-value", overwrite=False
        )
        mock_repo.put_value.assert_any_await(
            "HEALTHYBOT_CHANNEL_ACCESS_TOKEN", "t0ken-value", overwrite=False
        )
        output = capsys.readouterr().out
        assert "s3cr3t-value" not in output
        assert "t0ken-value" not in output

    @pytest.mark.asyncio
    async def test_put_skips_missing_values(self, mock_repo) -> None:
        """Test that only provided values are stored."""
        await cmd_put(None, "token", True, repository=mock_repo)

        mock_repo.put_value.assert_awaited_once_with(
            "HEALTHYBOT_CHANNEL_ACCESS_TOKEN", "token", overwrite=True
        )

    @pytest.mark.asyncio
    async def test_put_existing_without_overwrite(self, mock_repo, capsys) -> None:
        """Test that existing parameters are reported and fail the command."""
        mock_repo.put_value.return_value = False

        exit_code = await cmd_put("secret", None, False, repository=mock_repo)

        assert exit_code == 1
        assert "already exists" in capsys.readouterr().out


class TestCmdCheck:
    """Tests for cmd_check command."""

    @pytest.mark.asyncio
    async def test_check_ok(self, mock_repo, capsys) -> None:
        """Test that resolvable credentials pass without printing values."""
        mock_repo.get_value.return_value = "very-secret-value"

        exit_code = await cmd_check(repository=mock_repo)

        assert exit_code == 0
        output = capsys.readouterr().out
        assert "very-secret-value" not in output
        assert "17 characters" in output

    @pytest.mark.asyncio
    async def test_check_missing(self, mock_repo, capsys) -> None:
        """Test that an unreadable credential fails the check."""
        mock_repo.get_value.side_effect = [
            SecretResolutionError(message="Failed to get parameter: ParameterNotFound"),
            "token",
        ]

        exit_code = await cmd_check(repository=mock_repo)

        assert exit_code == 1
        assert "ParameterNotFound" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_check_empty(self, mock_repo) -> None:
        """Test that an empty credential fails the check."""
        mock_repo.get_value.return_value = ""

        assert await cmd_check(repository=mock_repo) == 1
