"""
Unit tests for the result file writer.
"""
import pytest

from division_tool.exceptions import ResultFileError
from division_tool.services.result_writer import ResultWriter, format_result_content


class TestFormatResultContent:

    def test_template(self):
        assert format_result_content(5) == "Division result: 5"
        assert format_result_content(-3) == "Division result: -3"
        assert format_result_content(0) == "Division result: 0"


class TestResultWriter:
    """Test writing and overwriting the result file."""

    def test_write_creates_file(self, tmp_path, logger):
        path = tmp_path / "result.txt"
        writer = ResultWriter(str(path), logger)

        returned = writer.write_result(5)

        assert returned == str(path)
        assert path.read_text(encoding="utf-8") == "Division result: 5"

    def test_write_overwrites_previous_content(self, tmp_path, logger):
        """The file is truncated, never appended to."""
        path = tmp_path / "result.txt"
        path.write_text("Division result: 123456789 and some old text", encoding="utf-8")
        writer = ResultWriter(str(path), logger)

        writer.write_result(7)

        assert path.read_text(encoding="utf-8") == "Division result: 7"

    def test_write_twice_is_idempotent(self, tmp_path, logger):
        path = tmp_path / "result.txt"
        writer = ResultWriter(str(path), logger)

        writer.write_result(4)
        first = path.read_bytes()
        writer.write_result(4)

        assert path.read_bytes() == first

    def test_missing_directory_raises_result_file_error(self, tmp_path, logger):
        path = tmp_path / "missing" / "result.txt"
        writer = ResultWriter(str(path), logger)

        with pytest.raises(ResultFileError) as exc_info:
            writer.write_result(1)

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
        assert exc_info.value.context['path'] == str(path)

    def test_permission_error_is_wrapped(self, mocker, logger):
        """Any OSError from open is wrapped and chained."""
        mocker.patch("builtins.open", side_effect=PermissionError("denied"))
        writer = ResultWriter("result.txt", logger)

        with pytest.raises(ResultFileError) as exc_info:
            writer.write_result(1)

        assert isinstance(exc_info.value.__cause__, PermissionError)
        assert exc_info.value.context['reason'] == "denied"

    def test_disk_full_on_write_is_wrapped(self, mocker, logger):
        handle = mocker.mock_open()
        handle.return_value.write.side_effect = OSError(28, "No space left on device")
        mocker.patch("builtins.open", handle)
        writer = ResultWriter("result.txt", logger)

        with pytest.raises(ResultFileError):
            writer.write_result(1)
