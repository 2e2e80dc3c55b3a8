"""Verify package imports work correctly."""


def test_import_linemark() -> None:
    """Test that linemark can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import linemark

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert linemark.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from linemark import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_resolve() -> None:
    """Every name in __all__ is importable from the package."""
    import linemark

    for name in linemark.__all__:
        assert hasattr(linemark, name), name
