"""Category presets: colour swatches, icon keys and default categories."""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional
from config import get_seed_dir
from logger import get_logger

logger = get_logger()

FALLBACK_ICON_LABEL = "Tag"


class PresetCatalog:
    """Loads category presets from a YAML file and caches them.

    Args:
        presets_file: YAML file to read. Defaults to db/seed/category_presets.yaml.
    """

    def __init__(self, presets_file: Optional[Path] = None):
        if presets_file is None:
            self.presets_file = get_seed_dir() / "category_presets.yaml"
        else:
            self.presets_file = presets_file

        self._data: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """Load the preset file, reading it from disk only once.

        Raises:
            FileNotFoundError: If the preset file doesn't exist.
            yaml.YAMLError: If YAML is invalid.
        """
        if self._data is not None:
            return self._data

        if not self.presets_file.exists():
            raise FileNotFoundError(f"Preset file not found: {self.presets_file}")

        logger.debug(f"Loading category presets from {self.presets_file}")

        with open(self.presets_file, "r") as f:
            self._data = yaml.safe_load(f) or {}

        return self._data

    @property
    def color_swatches(self) -> List[str]:
        return list(self.load().get("color_swatches", []))

    @property
    def icons(self) -> Dict[str, str]:
        """Icon key -> human-readable label."""
        return {icon["key"]: icon["label"] for icon in self.load().get("icons", [])}

    @property
    def default_categories(self) -> List[Dict[str, str]]:
        return list(self.load().get("default_categories", []))

    def icon_label(self, key: Optional[str]) -> str:
        """Label for an icon key, falling back to a generic tag."""
        if not key:
            return FALLBACK_ICON_LABEL
        return self.icons.get(key, FALLBACK_ICON_LABEL)

    def swatch_for(self, index: int) -> Optional[str]:
        """Pick a swatch for the n-th category, cycling through the palette."""
        swatches = self.color_swatches
        if not swatches:
            return None
        return swatches[index % len(swatches)]


def seed_categories(services, wallet_id: int, catalog: Optional[PresetCatalog] = None) -> int:
    """Create the default categories a wallet doesn't have yet.

    Args:
        services: Services container with the category service.
        wallet_id: The wallet to seed.
        catalog: Optional preset catalog (defaults to the bundled presets).

    Returns:
        Number of categories created.
    """
    catalog = catalog or PresetCatalog()
    existing = services.categories.find_by_wallet(wallet_id)
    created = 0

    for preset in catalog.default_categories:
        if services.categories.find_by_name(wallet_id, preset["name"]):
            logger.debug(f"Skipping existing category '{preset['name']}'")
            continue

        services.categories.create(
            wallet_id,
            preset["name"],
            preset["type"],
            color=preset.get("color") or catalog.swatch_for(len(existing) + created),
            icon=preset.get("icon"),
        )
        created += 1

    logger.info(f"Seeded {created} categories for wallet {wallet_id}")
    return created
