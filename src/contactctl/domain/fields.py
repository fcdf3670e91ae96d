"""Name field types and the validated field constructor.

A field is only ever built through :func:`make_field`, which is the single
validation gate. The field types themselves carry no bounds.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Self

from pydantic import BaseModel

from contactctl.domain.predicates import Predicate


class NameField(BaseModel):
    """Base for the text-wrapping name fields."""

    model_config = {"frozen": True}

    text: str

    @classmethod
    def of(cls, text: str) -> Self:
        return cls(text=text)

    def __str__(self) -> str:
        return self.text


class FirstName(NameField):
    pass


class MiddleName(NameField):
    pass


class LastName(NameField):
    pass


def make_field[T](predicate: Predicate, raw: str, build: Callable[[str], T]) -> T | None:
    """Build a field from *raw* if it satisfies *predicate*, else return None.

    Absence carries no diagnostic; the caller knows which predicate it used.
    """
    if predicate(raw):
        return build(raw)
    return None


def field_of[T](build: Callable[[str], T]) -> Callable[[Predicate], Callable[[str], T | None]]:
    """Curry :func:`make_field` over a field type: ``predicate -> raw -> field | None``."""

    def _with_predicate(predicate: Predicate) -> Callable[[str], T | None]:
        def _make(raw: str) -> T | None:
            return make_field(predicate, raw, build)

        return _make

    return _with_predicate


first_name_of = field_of(FirstName.of)
middle_name_of = field_of(MiddleName.of)
last_name_of = field_of(LastName.of)
