"""Filter selection and options."""

from dataclasses import dataclass, field
from typing import Dict

from engines.registry import get_filter


@dataclass
class FilterParams:
    """Which filter to run and its scalar options.

    Geometry parameters (``length``, ``rows``, ``columns``) come from the
    image. ``bpp`` defaults to the image's bytes per pixel when omitted.
    """

    name: str
    options: Dict[str, object] = field(default_factory=dict)

    def __post_init__(self):
        info = get_filter(self.name)
        unknown = set(self.options) - set(info.options)
        if unknown:
            raise ValueError(
                f"{self.name} does not take {', '.join(sorted(unknown))}; "
                f"options are: {', '.join(info.options) or 'none'}"
            )
        missing = [p for p in info.options if p not in self.options and p != 'bpp']
        if missing:
            raise ValueError(f"{self.name} requires {', '.join(missing)}")

    @property
    def family(self) -> str:
        return get_filter(self.name).family
