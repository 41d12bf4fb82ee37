import collections
import dataclasses
import math
from collections.abc import Callable, Iterator
from typing import Final, NamedTuple

import numpy as np

GOLDEN_SECTION: Final = (3.0 - math.sqrt(5.0)) / 2.0
SQRT_EPS: Final = math.sqrt(float(np.finfo(np.float64).eps))


class InvalidBoundsError(ValueError):
    """Error raised when the lower bound is not less than the upper bound."""


@dataclasses.dataclass(frozen=True, slots=True)
class OptimizationResult:
    """Output of :func:`minimize` and :func:`maximize`.

    Attributes
    ----------
    x : float
        Point at which the local extremum was found.
    fx : float
        Value of the objective function at `x`.
    iterations : int
        Number of evaluations of the objective function, including the initial one.
    """

    x: float
    fx: float
    iterations: int


class _Bracket(NamedTuple):
    a: float
    b: float
    x: float
    fx: float
    iterations: int


def _parabolic_step(
    a: float,
    b: float,
    x: float,
    w: float,
    v: float,
    fx: float,
    fw: float,
    fv: float,
    e: float,
    tol1: float,
) -> float | None:
    """Return the step from `x` to the vertex of the parabola through `v`, `w` and
    `x`, or ``None`` if the step is not trustworthy.

    The step is rejected unless it is shorter than half of `e` and its vertex lies
    strictly inside ``(a, b)``. A vertex within ``2 * tol1`` of either endpoint is
    replaced by a step of `tol1` toward the midpoint.
    """
    r = (x - w) * (fx - fv)
    q = (x - v) * (fx - fw)
    p = (x - v) * q - (x - w) * r
    q = 2.0 * (q - r)

    if q > 0.0:
        p = -p
    else:
        q = -q

    if not (abs(p) < abs(0.5 * q * e) and q * (a - x) < p < q * (b - x)):
        return None

    d = p / q
    tol2 = 2.0 * tol1

    # fun must not be evaluated too close to a or b
    if (x + d) - a < tol2 or b - (x + d) < tol2:
        return tol1 if x < 0.5 * (a + b) else -tol1

    return d


def _trial_point(x: float, d: float, tol1: float) -> float:
    if abs(d) >= tol1:
        return x + d

    return x + tol1 if d >= 0.0 else x - tol1


def _update_wv(
    x: float, w: float, v: float, fw: float, fv: float, u: float, fu: float
) -> tuple[float, float, float, float]:
    # u did not improve on x; keep w and v as the second and third best points
    if fu <= fw or w == x:
        return u, fu, w, fw

    if fu <= fv or v == x or v == w:
        return w, fw, u, fu

    return w, fw, v, fv


def _brent(
    fun: Callable, lower: float, upper: float, tol: float, max_iter: int
) -> Iterator[_Bracket]:
    # R. P. Brent, Algorithms for Minimization without Derivatives, 1973, p. 79.
    a, b = lower, upper
    x = v = w = a + GOLDEN_SECTION * (b - a)
    fx = fv = fw = fun(x)
    d = e = 0.0
    nfev = 1
    yield _Bracket(a, b, x, fx, nfev)

    while nfev < max_iter:
        m = 0.5 * (a + b)
        tol1 = SQRT_EPS * abs(x) + tol
        tol2 = 2.0 * tol1

        if abs(x - m) <= tol2 - 0.5 * (b - a):
            break

        step = None

        if abs(e) > tol1:
            step = _parabolic_step(a, b, x, w, v, fx, fw, fv, e, tol1)
            e = d

        if step is None:
            e = (b if x < m else a) - x
            d = GOLDEN_SECTION * e
        else:
            d = step

        u = _trial_point(x, d, tol1)
        fu = fun(u)
        nfev += 1

        if fu <= fx:
            if u < x:
                b = x
            else:
                a = x

            v, fv = w, fw
            w, fw = x, fx
            x, fx = u, fu
        else:
            if u < x:
                a = u
            else:
                b = u

            w, fw, v, fv = _update_wv(x, w, v, fw, fv, u, fu)

        yield _Bracket(a, b, x, fx, nfev)


def minimize(
    fun: Callable, lower: float, upper: float, tol: float, max_iter: int
) -> OptimizationResult:
    """Find a local minimum of the univariate scalar-valued function in a bounded
    interval by Brent's method.

    Parameters
    ----------
    fun : Callable
        Function to be minimized. It is called with a single float.
    lower : float
        Lower bound of the interval.
    upper : float
        Upper bound of the interval.
    tol : float
        Absolute tolerance. The effective tolerance at `x` is
        ``sqrt(eps) * abs(x) + tol``.
    max_iter : int
        Maximum number of evaluations of `fun`, including the initial one.

    Returns
    -------
    OptimizationResult

    Raises
    ------
    InvalidBoundsError
        If `lower` is not less than `upper`. `fun` is never evaluated in that case.
    ValueError
        If `max_iter` is less than 1.

    Warnings
    --------
    Reaching `max_iter` is not an error; the best point found so far is returned and
    ``iterations == max_iter`` is the only sign that the tolerance was not met.
    Exceptions raised by `fun` are propagated as is, and non-finite values returned
    by `fun` are not treated specially.

    Notes
    -----
    Golden-section steps guarantee linear convergence, and parabolic interpolation
    steps are taken whenever they are trustworthy. Only a local minimum is found.

    Besides the bounds, `max_iter` is validated as well: the initial evaluation
    already counts as one iteration, so a cap below 1 could not be honored and
    raises :exc:`ValueError` instead. `tol` is not validated.

    See Also
    --------
    maximize

    Examples
    --------
    >>> r = minimize(lambda x: (x - 1.5) ** 2, 0.0, 4.0, 1e-8, 100)
    >>> print(f"{r.x:.5f}")
    1.50000
    >>> r.iterations <= 100
    True
    """
    if not lower < upper:
        raise InvalidBoundsError(f"lower bound {lower} is not less than {upper}")

    if max_iter < 1:
        raise ValueError("max_iter must be at least 1")

    states = _brent(fun, float(lower), float(upper), tol, max_iter)
    last = collections.deque(states, maxlen=1)[0]
    return OptimizationResult(last.x, last.fx, last.iterations)


def maximize(
    fun: Callable, lower: float, upper: float, tol: float, max_iter: int
) -> OptimizationResult:
    """Find a local maximum of the univariate scalar-valued function in a bounded
    interval by Brent's method.

    Parameters
    ----------
    fun : Callable
        Function to be maximized.
    lower : float
        Lower bound of the interval.
    upper : float
        Upper bound of the interval.
    tol : float
        Absolute tolerance.
    max_iter : int
        Maximum number of evaluations of `fun`, including the initial one.

    Returns
    -------
    OptimizationResult
        `fx` is the value of `fun` itself, not of its negation.

    See Also
    --------
    minimize

    Examples
    --------
    >>> r = maximize(lambda x: x * (1 - x), 0, 1, 1e-8, 100)
    >>> print(f"{r.x:.5f} {r.fx:.5f}")
    0.50000 0.25000
    """
    result = minimize(lambda x: -fun(x), lower, upper, tol, max_iter)
    return dataclasses.replace(result, fx=-result.fx)
