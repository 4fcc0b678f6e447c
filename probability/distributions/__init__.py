from .distribution import Continuous, Discrete, Distribution
from .continuous import (
    Beta,
    Cauchy,
    ChiSquared,
    Exponential,
    FisherF,
    Gamma,
    Gaussian,
    Laplace,
    Logistic,
    LogNormal,
    Normal,
    Pert,
    StudentT,
    Triangular,
    Uniform,
)
from .discrete import Bernoulli, Binomial, Categorical, Geometric, Poisson

__all__ = [
    "Distribution",
    "Continuous",
    "Discrete",
    "Uniform",
    "Exponential",
    "Normal",
    "Gaussian",
    "LogNormal",
    "Cauchy",
    "Laplace",
    "Logistic",
    "Triangular",
    "Gamma",
    "ChiSquared",
    "Beta",
    "Pert",
    "StudentT",
    "FisherF",
    "Bernoulli",
    "Binomial",
    "Poisson",
    "Geometric",
    "Categorical",
]
