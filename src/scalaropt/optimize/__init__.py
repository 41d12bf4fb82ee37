"""
#########################################################
Bounded scalar optimization (:mod:`scalaropt.optimize`)
#########################################################

.. currentmodule:: scalaropt.optimize

This module provides derivative-free solvers for local optimization of univariate
scalar-valued functions on a bounded interval.

Local optimization
==================

.. autosummary::
    :toctree: generated/

    maximize
    minimize

Miscellaneous
=============

.. autosummary::
    :toctree: generated/

    InvalidBoundsError
    OptimizationResult

"""

from .optimize import InvalidBoundsError, OptimizationResult, maximize, minimize

__all__ = [
    "InvalidBoundsError",
    "OptimizationResult",
    "maximize",
    "minimize",
]
