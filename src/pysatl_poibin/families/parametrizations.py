"""
Parametrizations
================

A parametrization is a frozen dataclass holding one way of writing down a
family's parameters. It knows its constraints, how to convert itself to the
family's base parametrization, and (for the base parametrization) how to
derive state such as a probability table once the values are accepted.

Classes are attached to a family with the :func:`parametrization` class
decorator; predicates marked with :func:`constraint` become its constraints.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

from pysatl_poibin.errors import InvalidParameterError

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_poibin.families.parametric_family import ParametricFamily
    from pysatl_poibin.types import ParametrizationName

_CONSTRAINT_MARK = "__constraint_description__"


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """A named predicate over parameter values."""

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Base class of parametrization dataclasses.

    The :func:`parametrization` decorator fills in ``__family__``,
    ``__param_name__`` and ``_constraints``.
    """

    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[tuple[ParametrizationConstraint, ...]] = ()

    @property
    def name(self) -> ParametrizationName:
        return type(self).__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Values passed to the constructor, by field name (derived fields left out)."""
        return {f.name: getattr(self, f.name) for f in fields(self) if f.init}  # type: ignore[arg-type]

    def validate(self) -> None:
        """
        Check every constraint, in declaration order.

        Raises
        ------
        InvalidParameterError
            For the first constraint that does not hold.
        """
        for rule in self._constraints:
            if not rule.check(self):
                raise InvalidParameterError(f'Constraint "{rule.description}" does not hold')

    def transform_to_base_parametrization(self) -> Parametrization:
        """Same parameters in the family's base parametrization (identity by default)."""
        return self

    def prepare(self) -> None:
        """
        Derive state from accepted parameters.

        The family calls this once on base parameters, after validation and
        before binding characteristics. Does nothing by default.
        """


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Mark an instance method as a constraint of its parametrization.

    The predicate's result is coerced to ``bool``; ``description`` is used in
    the :class:`InvalidParameterError` message when it fails.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def predicate(*args: P.args, **kwargs: P.kwargs) -> bool:
            return bool(func(*args, **kwargs))

        setattr(predicate, _CONSTRAINT_MARK, description)
        return predicate

    return decorator


def _constraints_of(cls: type) -> tuple[ParametrizationConstraint, ...]:
    found = []
    for attr_name, attr in vars(cls).items():
        if isinstance(attr, staticmethod | classmethod):
            if hasattr(attr.__func__, _CONSTRAINT_MARK):
                raise TypeError(
                    f"@constraint '{attr_name}' must be an instance method, "
                    f"not @{type(attr).__name__}"
                )
        elif isfunction(attr) and hasattr(attr, _CONSTRAINT_MARK):
            found.append(ParametrizationConstraint(getattr(attr, _CONSTRAINT_MARK), attr))
    return tuple(found)


def parametrization(
    *, family: ParametricFamily, name: ParametrizationName
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Class decorator registering a parametrization with ``family`` under ``name``.

    Classes that are not dataclasses yet become frozen slotted dataclasses.

    Raises
    ------
    TypeError
        If a ``@constraint`` is a static or class method.
    ValueError
        If ``family`` already has a parametrization called ``name``.
    """

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)
        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _constraints_of(cls)
        family.register_parametrization(name, cls)
        return cls

    return decorator
