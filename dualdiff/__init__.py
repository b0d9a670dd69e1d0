"""Forward-mode automatic differentiation with higher-order dual numbers.

Submodules: dual, derivative, gradient, taylorseries and vectors.
"""

__version__ = "0.1.0"

__all__ = ["dual", "derivative", "gradient", "taylorseries", "vectors"]