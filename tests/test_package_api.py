"""
Public API Tests

The package root re-exports everything a game layer needs.
"""

import packages.calculation as calc


def test_version():
    assert calc.__version__ == "1.1.0"


def test_all_names_resolve():
    for name in calc.__all__:
        assert hasattr(calc, name), name


def test_directions():
    assert [d.name for d in calc.SpecifiedDirection] == ["ONLY_INCREASE", "ONLY_REDUCED"]


def test_error_hierarchy():
    assert issubclass(calc.InvalidArgumentError, calc.CalculationError)
    assert issubclass(calc.NullReferenceError, calc.CalculationError)
    assert issubclass(calc.InvalidArgumentError, ValueError)
    assert issubclass(calc.NullReferenceError, TypeError)
