"""Verify package imports work correctly."""


def test_import_textcursor() -> None:
    """Test that textcursor can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import textcursor

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert textcursor.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from textcursor import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api() -> None:
    """Every name in __all__ is importable from the package root."""
    import textcursor

    for name in textcursor.__all__:
        assert hasattr(textcursor, name), name
