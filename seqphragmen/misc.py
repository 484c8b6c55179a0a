"""
Miscellaneous functions for sets of candidates and for comparing numbers.
"""

import math
import numpy as np

FLOAT_ISCLOSE_REL_TOL = 1e-12
"""
The relative tolerance when comparing floats.

See also: `math.isclose() <https://docs.python.org/3/library/math.html#math.isclose>`_.
"""

FLOAT_ISCLOSE_ABS_TOL = 1e-12
"""
The absolute tolerance when comparing floats.

See also: `math.isclose() <https://docs.python.org/3/library/math.html#math.isclose>`_.
"""


class CandidateSet(set):
    """
    A set of candidates given by their indices, that is, a set of non-negative integers.

    Parameters
    ----------
        candidates : iterable
            An iterable of candidate indices (non-negative integers).

        num_cand : int, optional
            The number of candidates. Used only for checks.

            If `num_cand` is provided, it is verified that `candidates` does not contain
            numbers `>= num_cand`.
    """

    def __init__(self, candidates=(), num_cand=None):
        candidates = list(candidates)
        super().__init__(candidates)
        if len(candidates) != len(self):
            raise ValueError(f"CandidateSet initialized with duplicate elements ({candidates}).")

        for cand in candidates:
            if not isinstance(cand, (int, np.integer)) or isinstance(cand, bool):
                raise TypeError(
                    f"Object of type {str(type(cand))} not suitable as candidate index, "
                    f"only non-negative integers allowed."
                )

        if not all(cand >= 0 for cand in candidates):
            raise ValueError(
                f"CandidateSet initialized with negative candidate indices ({candidates})."
            )

        if num_cand is not None and any(cand >= num_cand for cand in candidates):
            raise ValueError(
                f"CandidateSet initialized with elements that are >= num_cand ({num_cand}), "
                f"the number of candidates ({candidates})."
            )

    def __str__(self):
        return self.str_with_names()

    def str_with_names(self, cand_names=None):
        """
        Format a CandidateSet, using the identifiers of candidates (instead of indices).

        Parameters
        ----------
            cand_names : list of str, optional
                Identifier of every candidate, addressed by candidate index.

        Returns
        -------
            str
        """
        return str_set_of_candidates(self, cand_names)


def str_set_of_candidates(candset, cand_names=None):
    """
    Nicely format a set of candidates.

    .. doctest::

        >>> print(str_set_of_candidates({0, 1, 3, 2}))
        {0, 1, 2, 3}
        >>> print(str_set_of_candidates({0, 3, 1}, cand_names=["X", "Y", "Z", "W"]))
        {W, X, Y}

    Parameters
    ----------
        candset : iterable of int
            An iterable of candidate indices.

        cand_names : list of str, optional
            Identifier of every candidate.

    Returns
    -------
        str
    """
    if cand_names is None:
        named = sorted(str(cand) for cand in candset)
    else:
        named = sorted(str(cand_names[cand]) for cand in candset)
    return "{" + ", ".join(named) + "}"


def str_loads(loads):
    """
    Format a load distribution (one number per voter) as a tuple-like string.

    .. doctest::

        >>> print(str_loads([0, 0.5, 0.25]))
        (0, 0.5, 0.25)

    Parameters
    ----------
        loads : iterable of numbers

    Returns
    -------
        str
    """
    return "(" + ", ".join(str(load) for load in loads) + ")"


def header(text, symbol="-"):
    """
    Format a header for `text`.

    Parameters
    ----------
        text : str
            Header text.

        symbol : str
            Symbol to be used for the box around the header text; should be exactly 1 character.

    Returns
    -------
        str
    """
    border = symbol[0] * len(text) + "\n"
    return border + text + "\n" + border


def isclose(x, y):
    """
    Compare two numbers using the default values for absolute and relative tolerance.

    Parameters
    ----------
        x, y : float
            Two numbers.

    Returns
    -------
        bool
    """
    return math.isclose(x, y, rel_tol=FLOAT_ISCLOSE_REL_TOL, abs_tol=FLOAT_ISCLOSE_ABS_TOL)
