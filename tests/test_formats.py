"""Tests for the debate format catalog."""

import pytest

from debate_setup.formats import FormatRegistry, OxfordFormat, SocraticFormat, format_registry


def test_built_in_formats_registered() -> None:
    assert format_registry.list_formats() == ["oxford", "lincoln_douglas", "policy", "socratic"]


def test_unknown_format_raises() -> None:
    with pytest.raises(ValueError, match="Unknown format: freestyle"):
        format_registry.get_format("freestyle")
    assert format_registry.has_format("freestyle") is False


def test_format_descriptions() -> None:
    descriptions = format_registry.get_format_descriptions()
    assert descriptions["lincoln_douglas"]["display_name"] == "Lincoln-Douglas"
    assert all(d["description"] for d in descriptions.values())


@pytest.mark.parametrize(
    ("name", "rounds"),
    [("oxford", 3), ("lincoln_douglas", 3), ("policy", 3), ("socratic", 4)],
)
def test_default_rounds(name: str, rounds: int) -> None:
    assert format_registry.get_format(name).default_rounds == rounds


def test_duplicate_registration_is_rejected() -> None:
    registry = FormatRegistry([OxfordFormat])
    with pytest.raises(ValueError, match="already registered"):
        registry.register(OxfordFormat())
    assert registry.list_formats() == ["oxford"]


def test_custom_registry_is_independent() -> None:
    registry = FormatRegistry([SocraticFormat])
    assert registry.has_format("socratic") is True
    assert registry.has_format("oxford") is False
    assert format_registry.has_format("oxford") is True
