"""Site configuration service.

The configuration is a single document (``site/config``). Until the first
write it does not exist and reads answer with the built-in defaults.
"""

from collections.abc import Mapping
from typing import Any, Union

from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError
from ..logging import content_logger
from ..models.requests import SiteConfigUpdate
from ..models.responses import SiteConfig
from ..store import SITE, SITE_CONFIG_ID, DocumentStore
from .clock import Clock, epoch_ms


class SiteConfigService:
    """Service for reading and merge-updating the site configuration."""

    def __init__(self, store: DocumentStore, clock: Clock = epoch_ms):
        self.store = store
        self.clock = clock

    async def get_config(self) -> SiteConfig:
        """Stored configuration over the defaults. Never persists anything."""
        doc = await self.store.get(SITE, SITE_CONFIG_ID)
        if doc is None:
            return SiteConfig()
        return SiteConfig.model_validate(doc.data)

    async def update_config(
        self, partial: Union[SiteConfigUpdate, Mapping[str, Any], None]
    ) -> dict[str, Any]:
        """Merge the fields present in ``partial`` into the stored document.

        Fields not sent stay as they are. No format checks are made on
        colors, and ``customHTML`` is stored verbatim. Anything that is not
        a mapping counts as an empty update, which still bumps ``updatedAt``.

        Returns:
            The applied fields, keyed by wire name (without ``updatedAt``).
        """
        if not isinstance(partial, (SiteConfigUpdate, Mapping)):
            partial = {}
        if not isinstance(partial, SiteConfigUpdate):
            try:
                partial = SiteConfigUpdate.model_validate(partial)
            except PydanticValidationError as e:
                raise ValidationError.from_errors(e.errors())

        patch = partial.to_patch()
        await self.store.set(
            SITE, SITE_CONFIG_ID, {**patch, "updatedAt": self.clock()}, merge=True
        )
        content_logger.updated("SiteConfig", SITE_CONFIG_ID)
        return patch
