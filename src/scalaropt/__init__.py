from .optimize import InvalidBoundsError, OptimizationResult, maximize, minimize

__all__ = [
    "InvalidBoundsError",
    "OptimizationResult",
    "maximize",
    "minimize",
]
