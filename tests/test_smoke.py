"""Smoke tests to verify package structure and imports work."""


def test_import_types():
    """Test that core types can be imported."""
    from mprelude import Either, Just, Left, Maybe, Nothing, NothingType, Right

    assert Just is not None
    assert Nothing is not None
    assert NothingType is not None
    assert Left is not None
    assert Right is not None
    assert Maybe is not None
    assert Either is not None


def test_import_constructors():
    """Test that wrap_error and catching can be imported."""
    from mprelude import catching, wrap_error

    assert wrap_error is not None
    assert catching is not None


def test_import_errors():
    """Test that error types can be imported."""
    from mprelude import MissingCallbackError, PreludeError, WrongVariantError

    assert issubclass(MissingCallbackError, PreludeError)
    assert issubclass(MissingCallbackError, TypeError)
    assert issubclass(WrongVariantError, PreludeError)
    assert issubclass(WrongVariantError, RuntimeError)


def test_submodule_imports():
    """Test that submodule imports work."""
    from mprelude.decorators import catching  # noqa: F401
    from mprelude.either import Left, Right, wrap_error  # noqa: F401
    from mprelude.errors import MissingCallbackError, WrongVariantError  # noqa: F401
    from mprelude.maybe import Just, Nothing, NothingType  # noqa: F401

    assert True  # If we get here, all imports worked


def test_all_exports_resolve():
    """Every name in __all__ is an attribute of the package."""
    import mprelude

    for name in mprelude.__all__:
        assert hasattr(mprelude, name), name


def test_sample_fixtures(sample_just, sample_nothing, sample_left, sample_right):
    """Shared fixtures produce one value of each variant."""
    assert sample_just.is_just()
    assert sample_nothing.is_nothing()
    assert sample_left.is_left()
    assert sample_right.is_right()
