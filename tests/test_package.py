"""Package import smoke test."""


def test_imports() -> None:
    """Test that the main package can be imported."""
    import deckclock

    assert deckclock.__version__ == "0.1.0"
