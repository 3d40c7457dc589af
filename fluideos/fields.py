# SPDX-FileCopyrightText: 2020-2023 JosiePy Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" Named indices for the components of a :class:`~.State` """

import sys

from typing import List, Optional

from aenum import (
    is_sunder,
    is_dunder,
    is_descriptor,
    is_private_name,
)


class Field(int):
    """An :class:`int` that also remembers the name of the state component it
    indexes"""

    name: str
    value: int

    def __new__(cls, name: str, value: int):
        obj = super().__new__(cls, value)
        obj.name = name
        obj.value = value

        return obj

    def __repr__(self):
        return f"<{self.name}: {self.value}>"


class FieldsMeta(type):
    """A lightweight :class:`Enum`-like metaclass. Every public class
    attribute with an integer value is turned into a :class:`Field`, so that
    ``PrimFields.p`` can be used directly to index a :class:`numpy.ndarray`
    """

    _field_values: List[Field]
    _field_names: List[str]
    _len: int

    def __new__(cls, name, bases, clsdict):
        fields = {
            k: Field(k, v)
            for (k, v) in clsdict.items()
            if not (
                is_sunder(k)
                or is_dunder(k)
                or is_private_name(name, k)
                or is_descriptor(v)
            )
        }

        fields_cls = super().__new__(cls, name, bases, fields)

        fields_cls._field_values = sorted(fields.values())
        fields_cls._field_names = [f.name for f in fields_cls._field_values]
        fields_cls._len = len(fields)

        return fields_cls

    def __iter__(cls):
        return iter(cls._field_values)

    def __call__(
        cls,
        clsname: Optional[str] = None,
        fields: Optional[dict] = None,
        *args,
        **kwargs,
    ):
        """Functional creation, e.g. ``Fields("Prim", {"rho": 0, "p": 1})``"""
        metacls = cls.__class__

        if fields is None:
            raise TypeError(
                "Fields classes are used like an `Enum`. They can't be "
                "directly instantiated"
            )

        obj = metacls.__new__(metacls, clsname, (cls,), fields)
        obj.__module__ = sys._getframe(1).f_globals["__name__"]

        return obj

    def __getitem__(cls, idx):
        return cls._field_values[idx]

    def __len__(cls):
        return cls._len

    def __contains__(cls, name: str) -> bool:
        return name in cls._field_names

    def names(cls) -> List[str]:
        """Returns the field names, ordered by index"""

        return cls._field_names


class Fields(metaclass=FieldsMeta):
    pass
