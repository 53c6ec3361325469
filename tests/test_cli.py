"""
Tests for the Tarnish command-line interface.

Tests cover:
- Successful runs write the output and report COMPLETE
- Filter failures are reported with the right category and exit 1
- Startup failures (missing paths, unknown filters, bad input files)
- Argument pass-through (negative numbers)
- Filter listing and message formatting
"""

import pytest
from PIL import Image

from tests.helpers import pixel_values

from Tarnish_Libs.cli import EXIT_FAILURE, EXIT_SUCCESS, format_message, main
from Tarnish_Libs.constants import (
    MSG_DECODE_FAILED,
    MSG_INTENTIONAL_ARGERROR,
    MSG_INTENTIONAL_ERROR,
    MSG_INVALID_COMMAND,
    MSG_MISSING_PATHS,
    MSG_NO_COMMAND,
    MSG_OPEN_FAILED,
    MSG_REQUIRES_DEGREES,
    MSG_SAVE_FAILED,
    STYLE_ERROR,
    STYLE_RESET,
)


@pytest.fixture
def input_image(tmp_path):
    """Write a small RGBA PNG and return its path."""
    path = tmp_path / "input.png"
    image = Image.new("RGBA", (6, 4), (200, 50, 25, 255))
    image.putpixel((0, 0), (0, 0, 0, 128))
    image.save(path)
    return path


class TestSuccessfulRuns:
    """Runs that end in a saved image."""

    def test_copy(self, input_image, tmp_path, capsys):
        output = tmp_path / "out.png"

        code = main([str(input_image), str(output), "copy"])

        assert code == EXIT_SUCCESS
        assert output.exists()
        with Image.open(output) as saved, Image.open(input_image) as original:
            assert pixel_values(saved) == pixel_values(original)
        captured = capsys.readouterr()
        assert f"COMPLETE: Saved successfully to {output}" in captured.out
        assert captured.err == ""

    def test_negative_argument_passed_to_filter(self, input_image, tmp_path):
        output = tmp_path / "out.png"
        assert main([str(input_image), str(output), "huerotate", "-90"]) == EXIT_SUCCESS
        assert output.exists()

    def test_jpeg_output(self, input_image, tmp_path):
        output = tmp_path / "out.jpg"

        assert main([str(input_image), str(output), "colorize", "3366CC"]) == EXIT_SUCCESS

        with Image.open(output) as saved:
            assert saved.format == "JPEG"
            assert saved.size == (6, 4)

    def test_pallettize(self, input_image, tmp_path, palette_file):
        output = tmp_path / "out.png"
        palette = palette_file([(10, 20, 30, 255)])

        assert main([str(input_image), str(output), "pallettize", str(palette)]) == EXIT_SUCCESS

        with Image.open(output) as saved:
            assert {pixel[:3] for pixel in pixel_values(saved)} == {(10, 20, 30)}

    def test_verbose_flag(self, input_image, tmp_path):
        output = tmp_path / "out.png"
        assert main(["-v", str(input_image), str(output), "mosaic", "3"]) == EXIT_SUCCESS


class TestFilterFailures:
    """Filters that return an error result."""

    def test_errortest(self, input_image, tmp_path, capsys):
        output = tmp_path / "out.png"

        code = main([str(input_image), str(output), "errortest"])

        assert code == EXIT_FAILURE
        assert not output.exists()
        captured = capsys.readouterr()
        assert f"ERROR: {MSG_INTENTIONAL_ERROR}" in captured.err
        assert "ARGUMENT ERROR" not in captured.err
        assert captured.out == ""

    def test_argerrortest(self, input_image, tmp_path, capsys):
        code = main([str(input_image), str(tmp_path / "out.png"), "argerrortest"])

        assert code == EXIT_FAILURE
        assert f"ARGUMENT ERROR: {MSG_INTENTIONAL_ARGERROR}" in capsys.readouterr().err

    def test_bad_filter_argument(self, input_image, tmp_path, capsys):
        code = main([str(input_image), str(tmp_path / "out.png"), "huerotate", "lots"])

        assert code == EXIT_FAILURE
        assert f"ARGUMENT ERROR: {MSG_REQUIRES_DEGREES}" in capsys.readouterr().err

    def test_missing_palette_is_error(self, input_image, tmp_path, capsys):
        code = main([
            str(input_image),
            str(tmp_path / "out.png"),
            "pallettize",
            str(tmp_path / "missing.png"),
        ])

        assert code == EXIT_FAILURE
        err = capsys.readouterr().err
        assert "ERROR: Failed to open palette image" in err


class TestStartupFailures:
    """Problems detected before or around the filter call."""

    def test_no_arguments(self, capsys):
        assert main([]) == EXIT_FAILURE
        assert MSG_MISSING_PATHS in capsys.readouterr().err

    def test_missing_output(self, input_image, capsys):
        assert main([str(input_image)]) == EXIT_FAILURE
        assert MSG_MISSING_PATHS in capsys.readouterr().err

    def test_missing_filter_name(self, input_image, tmp_path, capsys):
        assert main([str(input_image), str(tmp_path / "out.png")]) == EXIT_FAILURE
        assert f"ERROR: {MSG_NO_COMMAND}" in capsys.readouterr().err

    def test_unknown_filter(self, input_image, tmp_path, capsys):
        assert main([str(input_image), str(tmp_path / "out.png"), "Copy"]) == EXIT_FAILURE
        assert f"ERROR: {MSG_INVALID_COMMAND}" in capsys.readouterr().err

    def test_unknown_filter_checked_before_loading(self, tmp_path, capsys):
        code = main([str(tmp_path / "missing.png"), str(tmp_path / "out.png"), "nope"])

        assert code == EXIT_FAILURE
        assert MSG_INVALID_COMMAND in capsys.readouterr().err

    def test_missing_input(self, tmp_path, capsys):
        code = main([str(tmp_path / "missing.png"), str(tmp_path / "out.png"), "copy"])

        assert code == EXIT_FAILURE
        assert f"ERROR: {MSG_OPEN_FAILED}" in capsys.readouterr().err

    def test_undecodable_input(self, tmp_path, capsys):
        bad = tmp_path / "bad.png"
        bad.write_bytes(b"garbage")

        assert main([str(bad), str(tmp_path / "out.png"), "copy"]) == EXIT_FAILURE
        assert f"ERROR: {MSG_DECODE_FAILED}" in capsys.readouterr().err

    def test_oversized_input_reported_as_decode_failure(self, tmp_path, capsys, monkeypatch):
        path = tmp_path / "big.png"
        Image.new("RGB", (8, 8)).save(path)
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)

        assert main([str(path), str(tmp_path / "out.png"), "copy"]) == EXIT_FAILURE
        assert f"ERROR: {MSG_DECODE_FAILED}" in capsys.readouterr().err

    def test_unsaveable_output(self, input_image, tmp_path, capsys):
        output = tmp_path / "out.unknownformat"

        assert main([str(input_image), str(output), "copy"]) == EXIT_FAILURE
        assert f"ERROR: {MSG_SAVE_FAILED}" in capsys.readouterr().err

    def test_unknown_option_exits_one(self, input_image, tmp_path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--bogus", str(input_image), str(tmp_path / "out.png"), "copy"])

        assert excinfo.value.code == EXIT_FAILURE
        assert "ERROR:" in capsys.readouterr().err


class TestListingAndFormatting:
    """Filter listing and message formatting."""

    def test_list_filters(self, capsys):
        assert main(["--list-filters"]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        for name in ["copy", "huerotate", "rgbreplace", "mosaic", "colorize", "pallettize"]:
            assert name in out

    def test_list_filters_grouped_by_tag(self, capsys):
        main(["--list-filters"])

        lines = capsys.readouterr().out.splitlines()
        color_at = lines.index("color:")
        palette_at = lines.index("palette:")
        color_section = lines[color_at + 1:]
        assert color_section[0].split()[0] == "colorize"
        assert any(line.split()[:2] == ["pallettize", "<palette"] for line in lines[palette_at + 1:])
        assert "huerotate <degrees>" in "\n".join(lines)

    def test_format_message_plain(self):
        assert format_message("ERROR", "oops") == "ERROR: oops"

    def test_format_message_colored(self):
        assert format_message("ERROR", "oops", color=True) == f"{STYLE_ERROR}ERROR:{STYLE_RESET} oops"
