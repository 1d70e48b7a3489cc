"""
MessageLocalizer adapters.

Translation itself is owned by the host application. These adapters
cover the two cases the builder needs out of the box: no translation,
and a fixed lookup table.
"""

from typing import Mapping

from respond.domain.envelope.ports import MessageLocalizer


class PassthroughLocalizer(MessageLocalizer):
    """Returns templates unchanged."""

    def localize(self, template: str) -> str:
        return template


class CatalogLocalizer(MessageLocalizer):
    """Looks templates up in a translation table.

    Templates without a translation are returned unchanged. Translations
    must keep the ``%s`` placeholders of the source template.
    """

    def __init__(self, translations: Mapping[str, str]) -> None:
        self._translations = dict(translations)

    def localize(self, template: str) -> str:
        return self._translations.get(template, template)
