"""
Exception types raised by distribution construction.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class InvalidParameterError(ValueError):
    """Parameter values violate a parametrization constraint."""


class PMFInvariantError(AssertionError):
    """
    A computed probability mass function is not a probability vector.

    Signals a numerical defect (or a validation bypass that let invalid
    parameters through), never a recoverable input error.
    """


__all__ = [
    "InvalidParameterError",
    "PMFInvariantError",
]
