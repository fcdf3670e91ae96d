"""BaseService — foundation for contactctl services.

Every service receives the resolved :class:`ContactSettings` at
construction time and derives its predicates and checks from it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from contactctl.config.settings import ContactSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ContactService(BaseService):
            def assemble(self, first_name: str, ...) -> ServiceResult:
                ...
    """

    def __init__(self, settings: ContactSettings) -> None:
        self._settings = settings
