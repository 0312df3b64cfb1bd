"""
Constrained parameter records.

This module provides the base class for frozen parameter records whose
field values are checked by ``@constraint``-decorated predicates when the
record is created.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, fields, replace
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec, Self

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar


@dataclass(slots=True, frozen=True)
class Constraint:
    """
    Constraint on the field values of a parameter record.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Validation function that returns True if constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.

    Returns
    -------
    Callable[[Callable[P, bool]], Callable[P, bool]]
        Decorator that marks the function as a constraint.

    Notes
    -----
    The decorated function must be a predicate returning bool.
    Sets marker attributes on the function:
    - __is_constraint: True
    - __constraint_description: description
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def _collect_constraints(cls: type) -> list[Constraint]:
    """Collect constraint methods declared along the class hierarchy."""
    constraints: list[Constraint] = []
    for klass in reversed(cls.__mro__):
        for name, attr in vars(klass).items():
            if isinstance(attr, staticmethod):
                if getattr(attr.__func__, "__is_constraint", False):
                    raise TypeError(
                        f"@constraint '{name}' must be an instance method, not @staticmethod"
                    )
                continue
            if isinstance(attr, classmethod):
                if getattr(attr.__func__, "__is_constraint", False):
                    raise TypeError(
                        f"@constraint '{name}' must be an instance method, not @classmethod"
                    )
                continue

            func = attr if callable(attr) and isfunction(attr) else None
            if not func:
                continue
            if getattr(func, "__is_constraint", False):
                desc = getattr(func, "__constraint_description", func.__name__)
                constraints.append(Constraint(description=desc, check=func))
    return constraints


class ConstrainedRecord:
    """
    Base class for frozen dataclass records validated on creation.

    Subclasses are expected to be decorated with
    ``@dataclass(frozen=True, slots=True)``; constraints are discovered
    lazily on first validation and cached per class.
    """

    __slots__ = ()

    _constraints_cache: ClassVar[dict[type, list[Constraint]]] = {}

    def __post_init__(self) -> None:
        self.validate()

    @property
    def constraints(self) -> list[Constraint]:
        """Get constraints for this record."""
        cls = type(self)
        cached = ConstrainedRecord._constraints_cache.get(cls)
        if cached is None:
            cached = _collect_constraints(cls)
            ConstrainedRecord._constraints_cache[cls] = cached
        return cached

    @property
    def parameters(self) -> dict[str, Any]:
        """Get field values as a dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    def validate(self) -> None:
        """
        Validate all constraints for this record.

        Raises
        ------
        ValueError
            If any constraint is not satisfied.
        """
        for c in self.constraints:
            if not c.check(self):
                raise ValueError(f'Constraint "{c.description}" does not hold')

    def replace(self, **changes: Any) -> Self:
        """Return a validated copy with ``changes`` applied."""
        return replace(self, **changes)  # type: ignore[type-var]


__all__ = [
    "Constraint",
    "ConstrainedRecord",
    "constraint",
]
