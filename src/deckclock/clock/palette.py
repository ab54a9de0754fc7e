"""Color palettes for the clock renderers."""

from collections.abc import Mapping
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from deckclock.logging.config import get_logger

logger = get_logger(__name__)


class Palette(BaseModel):
    """
    Mapping from color role to color value.

    Each variant declares its roles as fields whose alias is the role name used
    by hosts (``lineOn``, ``background``, ...). Roles a variant does not know are
    kept as extra entries so they survive a round trip, but nothing draws with
    them. Colors are never validated here; the surface decides what it accepts.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @classmethod
    def _field_for_role(cls, role: str) -> Optional[str]:
        for name, info in cls.model_fields.items():
            if role in (name, info.alias):
                return name
        return None

    def merge(self, partial: Any) -> None:
        """
        Overwrite the roles present in ``partial``; other roles keep their value.

        Args:
            partial: Mapping of role name to color. Anything else is ignored.
        """
        if not isinstance(partial, Mapping):
            logger.debug(f"Ignoring palette update of type {type(partial).__name__}")
            return

        for role, color in partial.items():
            role = str(role)
            field_name = self._field_for_role(role)
            if field_name is not None:
                setattr(self, field_name, color)
            else:
                self.__pydantic_extra__[role] = color

    def snapshot(self) -> Dict[str, Any]:
        """Return the palette as a plain role -> color dict."""
        return self.model_dump(by_alias=True)

    def reset(self) -> None:
        """Restore the default colors and drop unknown roles."""
        defaults = type(self)()
        for name in type(self).model_fields:
            setattr(self, name, getattr(defaults, name))
        self.__pydantic_extra__.clear()


class DigitalPalette(Palette):
    """Palette of the seven-segment face."""

    line_on: str = Field(default="#FF0000", alias="lineOn")
    line_off: str = Field(default="#5A0000", alias="lineOff")
    background: str = "#200000"


class AnalogPalette(Palette):
    """Palette of the analog face."""

    hour: str = "#efefef"
    minute: str = "#cccccc"
    second: str = "#ff9933"
    stroke: str = "#cccccc"
    background: str = "#000000"
