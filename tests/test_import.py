"""Verify package imports work correctly."""


def test_import_lexis() -> None:
    """Test that lexis can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import lexis

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert lexis.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from lexis import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api() -> None:
    """Every name in __all__ is importable from the package root."""
    import lexis

    for name in lexis.__all__:
        assert hasattr(lexis, name), name
