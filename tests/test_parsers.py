"""Tests for parsing pyenv's version, versions and install --list output."""

from pyenv_menu.parsers import (
    drop_blank,
    drop_header,
    drop_system,
    parse_current,
    parse_installable,
    parse_installed,
    parse_tool_version,
    strip_active_marker,
)
from pyenv_menu.state import VersionEntry


def _names(entries):
    return [e.name for e in entries]


# --- named filtering steps ---

def test_drop_header_discards_first_line_whatever_it_says():
    assert drop_header(["3.12.1", "3.11.4"]) == ["3.11.4"]


def test_drop_header_on_empty_list():
    assert drop_header([]) == []


def test_drop_blank_removes_whitespace_only_lines():
    assert drop_blank(["3.9.6", "", "   ", "3.10.0"]) == ["3.9.6", "3.10.0"]


def test_drop_system_only_removes_exact_token():
    assert drop_system(["system", "3.9.6", "systemd-python"]) == ["3.9.6", "systemd-python"]


def test_strip_active_marker_with_set_by_annotation():
    assert strip_active_marker("* 3.11.4 (set by /root/.pyenv/version)") == ("3.11.4", True)


def test_strip_active_marker_without_marker():
    assert strip_active_marker("  3.9.6") == ("3.9.6", False)


def test_strip_active_marker_keeps_virtualenv_name_only():
    assert strip_active_marker("  3.9.6/envs/tools --> /home/dev/.pyenv/versions/3.9.6/envs/tools") == (
        "3.9.6/envs/tools",
        False,
    )


# --- pyenv version ---

def test_current_takes_first_token():
    assert parse_current("3.11.4 (set by /home/dev/.pyenv/version)") == [VersionEntry("3.11.4", is_current=True)]


def test_current_empty_output_gives_no_entry():
    assert parse_current("") == []
    assert parse_current("   \n") == []


# --- pyenv versions ---

def test_installed_strips_marker_and_system():
    entries = parse_installed("* 3.11.4\n  3.9.6\n  system")
    assert entries == [VersionEntry("3.11.4", is_current=True), VersionEntry("3.9.6")]


def test_installed_preserves_emitted_order():
    output = "  3.12.1\n  2.7.18\n  3.9.6\n"
    assert _names(parse_installed(output)) == ["3.12.1", "2.7.18", "3.9.6"]


def test_installed_drops_active_system():
    output = "* system (set by /home/dev/.pyenv/version)\n  3.9.6\n"
    assert parse_installed(output) == [VersionEntry("3.9.6")]


def test_installed_skips_blank_lines():
    assert _names(parse_installed("\n  3.9.6\n\n   \n  3.10.0\n")) == ["3.9.6", "3.10.0"]


def test_installed_lone_marker_line_is_dropped():
    assert parse_installed("*\n  3.9.6") == [VersionEntry("3.9.6")]


# --- pyenv install --list ---

def test_installable_discards_header():
    output = "Available versions:\n  2.7.18\n  3.12.1\n"
    assert _names(parse_installable(output)) == ["2.7.18", "3.12.1"]


def test_installable_discards_first_line_even_if_it_looks_like_a_version():
    assert _names(parse_installable("3.12.1\n3.11.4\n")) == ["3.11.4"]


def test_installable_drops_blank_and_system():
    output = "Available versions:\n\n  system\n  miniconda3-latest\n"
    assert _names(parse_installable(output)) == ["miniconda3-latest"]


def test_installable_entries_are_never_current():
    assert all(not e.is_current for e in parse_installable("Available versions:\n  3.12.1\n"))


# --- pyenv --version ---

def test_tool_version_second_token():
    assert parse_tool_version("pyenv 2.3.36") == "2.3.36"


def test_tool_version_odd_output():
    assert parse_tool_version("2.3.36") == "2.3.36"
    assert parse_tool_version("") == ""
