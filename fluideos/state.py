# SPDX-FileCopyrightText: 2020-2023 JosiePy Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import numpy as np

from typing import Collection, Type, Union, TYPE_CHECKING

from .fields import Fields


def unpickle_state(d, array):
    Q = StateTemplate(*d.keys())
    state = array.view(Q)

    return state


class State(np.ndarray):
    """:class:`State` is a subclass of :class:`numpy.ndarray` whose last axis
    is indexed by the :class:`~.Fields` stored in :attr:`fields`.

    A :class:`State` can be initialized from a :class:`StateTemplate`

    >>> Q = StateTemplate("rho", "U", "p")
    >>> state = np.array([1.0, 0.5, 2.0]).view(Q)
    >>> assert state[state.fields.p] == 2.0

    or directly from key-value arguments

    >>> state = State(rho=1.0, U=0.5, p=2.0)
    >>> assert state[state.fields.U] == 0.5

    If the class already defines its :attr:`fields`, keyword arguments are
    reordered to match them

    >>> state = Q(p=2.0, rho=1.0, U=0.5)
    >>> assert np.array_equal(state, [1.0, 0.5, 2.0])

    A :class:`State` can be multidimensional, the last dimension being the
    number of fields. That's how a stack of grid points is evaluated at once

    >>> states = np.random.random((10, 3)).view(Q)
    >>> assert states[..., Q.fields.rho].shape == (10,)
    """

    fields: Type[Fields]
    _FIELDS_ENUM_NAME = "FieldsEnum"

    def __new__(cls, *args, **kwargs):
        if args and kwargs:
            raise TypeError(
                "A State can be defined using positional arguments OR "
                "keyword arguments, not both"
            )

        if kwargs:
            if cls is not State:
                try:
                    args = tuple(
                        kwargs.pop(name) for name in cls.fields.names()
                    )
                except KeyError as exc:
                    raise TypeError(
                        f"Missing value for field {exc} of {cls.__name__}"
                    ) from None

                if kwargs:
                    raise TypeError(
                        f"Unknown fields for {cls.__name__}: "
                        f"{', '.join(kwargs)}"
                    )
            else:
                cls = StateTemplate(*kwargs.keys())
                args = tuple(kwargs.values())

        if isinstance(args[0], (int, float)):
            dtype: Union[Type[float], Type[object]] = float
        else:
            dtype = object

        return np.asarray(list(args), dtype=dtype).view(cls)

    def __reduce__(self):
        # The fields class is created on the fly, pickle its content instead
        enum_dict = {f.name: f.value for f in self.fields}
        return (unpickle_state, (enum_dict, self.__array__()))

    @classmethod
    def list_to_enum(cls, fields: Collection[str]) -> Type[Fields]:
        """Convert a list of textual fields to the :class:`Fields` that needs
        to be stored in this class :attr:`fields`"""

        return Fields(  # type: ignore
            cls._FIELDS_ENUM_NAME, dict(zip(fields, range(len(fields))))
        )

    @classmethod
    def zeros(cls, *shape: int) -> State:
        """Returns a zero-filled stack of states of the given leading
        ``shape``"""

        return np.zeros((*shape, len(cls.fields))).view(cls)


def StateTemplate(*fields: str) -> Type[State]:
    r"""A factory for a :class:`State`.

    It creates on the fly a :class:`State` class whose components can be
    accessed by name through :attr:`State.fields`

    >>> Q = StateTemplate("rho", "rhoU", "rhoV", "rhoW", "rhoE")
    >>> zero = Q(0, 0, 0, 0, 0)
    >>> assert zero[Q.fields.rhoE] == 0
    """
    state_fields: Type[Fields] = State.list_to_enum(fields)
    state_cls = type("DerivedState", (State,), {"fields": state_fields})

    return state_cls  # type: ignore


class SubsetState(State):
    """A :class:`State` made of a subset of the fields of a bigger
    :class:`State`, matched by field name. The indices of the matching fields
    in the bigger state are stored in :attr:`_subset_fields_map`

    Attributes
    ----------
    full_state_fields
        The fields of the full :class:`State`
    """

    if TYPE_CHECKING:
        _subset_fields_map: np.ndarray
        full_state_fields: Type[Fields]

    def __init_subclass__(cls, /, abstract=False, **kwargs):
        super().__init_subclass__(**kwargs)

        if not (abstract):
            missing = set(cls.fields.names()) - set(
                cls.full_state_fields.names()
            )
            if missing:
                raise TypeError(
                    f"{cls.__name__} has fields not present in the full "
                    f"state: {', '.join(sorted(missing))}"
                )

            cls._subset_fields_map = np.array(
                [
                    getattr(cls.full_state_fields, name)
                    for name in cls.fields.names()
                ]
            )
