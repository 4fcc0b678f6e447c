# tests/test_errors.py
import pytest

import probability
from probability.errors import ConstructionError, DomainError, ProbabilityError, UndefinedMomentError


@pytest.mark.parametrize(
    "error, builtin",
    [(ConstructionError, ValueError), (DomainError, ValueError), (UndefinedMomentError, ArithmeticError)],
)
def test_hierarchy(error, builtin):
    assert issubclass(error, ProbabilityError)
    assert issubclass(error, builtin)


def test_top_level_exports():
    for name in ("Normal", "Binomial", "Independent", "Xorshift128Plus", "NumpySource", "DomainError"):
        assert name in probability.__all__
        assert hasattr(probability, name)
    assert probability.__version__ == "0.1.0"
