# topmark:header:start
#
#   project      : SvgScribe
#   file         : test_hello.py
#   file_relpath : tests/cli/test_hello.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""`svgscribe hello`: output destinations, flag overrides and config layering."""

from __future__ import annotations

from typing import TYPE_CHECKING
from xml.etree import ElementTree as ET

from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_FILE_NOT_FOUND,
    assert_SUCCESS,
    run_cli_in,
)
from tests.conftest import mark_cli, mark_integration

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

SVG = "{http://www.w3.org/2000/svg}"

DEFAULT_HELLO = (
    '<?xml version="1.0"?>\n'
    '<svg width="500" height="500"\n'
    '     xmlns="http://www.w3.org/2000/svg"\n'
    '     xmlns:xlink="http://www.w3.org/1999/xlink">\n'
    '<circle cx="250" cy="250" r="100" />\n'
    '<text x="250" y="250" style="text-anchor:middle;font-size:30px;fill:white" >'
    "Hello, SVG</text>\n"
    "</svg>\n"
)


@mark_cli
@mark_integration
def test_hello_to_stdout(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["hello"])

    assert_SUCCESS(result)

    assert result.output == DEFAULT_HELLO


@mark_cli
@mark_integration
def test_hello_to_file(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["hello", "-o", "hello.svg"])

    assert_SUCCESS(result)

    assert result.output == ""
    written: str = (tmp_path / "hello.svg").read_text(encoding="utf-8")
    assert written == DEFAULT_HELLO
    assert ET.fromstring(written).tag == f"{SVG}svg"


@mark_cli
def test_flags_override_defaults(tmp_path: Path) -> None:
    result: Result = run_cli_in(
        tmp_path,
        ["hello", "--width", "200", "--height", "100", "--radius", "20", "--message", "Hi & bye"],
    )

    assert_SUCCESS(result)

    root: ET.Element = ET.fromstring(result.output)
    assert root.attrib["width"] == "200"
    assert root.attrib["height"] == "100"
    circle: ET.Element | None = root.find(f"{SVG}circle")
    assert circle is not None
    assert circle.attrib == {"cx": "100", "cy": "50", "r": "20"}
    text: ET.Element | None = root.find(f"{SVG}text")
    assert text is not None
    assert text.text == "Hi & bye"


@mark_cli
def test_empty_message_omits_text(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["hello", "--message", ""])

    assert_SUCCESS(result)

    assert "<text" not in result.output


@mark_cli
def test_local_config_file_is_discovered(tmp_path: Path) -> None:
    (tmp_path / "svgscribe.toml").write_text(
        '[canvas]\nwidth = 10\nheight = 8\nunit = "cm"\n\n[hello]\nradius = 3\nmessage = ""\n',
        encoding="utf-8",
    )

    result: Result = run_cli_in(tmp_path, ["hello"])

    assert_SUCCESS(result)

    assert '<svg width="10cm" height="8cm"' in result.output
    assert '<circle cx="5" cy="4" r="3" />' in result.output
    assert "<text" not in result.output


@mark_cli
def test_layering_pyproject_local_explicit_flags(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n\n[tool.svgscribe.canvas]\nwidth = 100\nheight = 100\n'
        '\n[tool.svgscribe.hello]\nradius = 10\nmessage = "from pyproject"\n',
        encoding="utf-8",
    )
    (tmp_path / "svgscribe.toml").write_text("[hello]\nradius = 20\n", encoding="utf-8")
    (tmp_path / "extra.toml").write_text('[hello]\ncircle_style = "fill:red"\n', encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["hello", "-c", "extra.toml", "--radius", "30"])

    assert_SUCCESS(result)

    assert '<svg width="100" height="100"' in result.output
    assert '<circle cx="50" cy="50" r="30" style="fill:red" />' in result.output
    assert ">from pyproject</text>" in result.output


@mark_cli
def test_no_config_skips_discovered_files(tmp_path: Path) -> None:
    (tmp_path / "svgscribe.toml").write_text("[canvas]\nwidth = 10\n", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["hello", "--no-config"])

    assert_SUCCESS(result)

    assert result.output == DEFAULT_HELLO


@mark_cli
def test_invalid_discovered_file_is_skipped(tmp_path: Path) -> None:
    (tmp_path / "svgscribe.toml").write_text("[canvas\nwidth = ", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["hello"])

    assert_SUCCESS(result)

    assert DEFAULT_HELLO in result.output


@mark_cli
def test_missing_explicit_config_is_an_error(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["hello", "--config", "missing.toml"])

    assert_CONFIG_ERROR(result)

    assert "missing.toml" in result.output


@mark_cli
def test_wrongly_typed_value_is_an_error(tmp_path: Path) -> None:
    (tmp_path / "svgscribe.toml").write_text('[canvas]\nwidth = "wide"\n', encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["hello"])

    assert_CONFIG_ERROR(result)

    assert "width" in result.output


@mark_cli
def test_output_in_missing_directory(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["hello", "-o", "nowhere/hello.svg"])

    assert_FILE_NOT_FOUND(result)

    assert "nowhere/hello.svg" in result.output
