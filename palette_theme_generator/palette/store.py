import json
import logging
import os

from .builder import add_color, remove_color
from .model import Palette, palette_from_dict, palette_to_dict

logger = logging.getLogger(__name__)


class PaletteStore:
    """Keyed collection of saved palettes, optionally backed by a JSON file.

    Without a path the store lives in memory only. With one, every change
    is written straight back to the file.
    """

    def __init__(self, path=None):
        self.path = path
        self._palettes = []
        if path is not None:
            self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path) as f:
                data = json.load(f)
            self._palettes = [palette_from_dict(item) for item in data]
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning("Could not load palettes from %s: %s", self.path, e)
            self._palettes = []

    def _save(self):
        if self.path is None:
            return
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump([palette_to_dict(p) for p in self._palettes], f, indent=2)

    def get_all(self):
        return list(self._palettes)

    def get_by_id(self, palette_id):
        for palette in self._palettes:
            if palette.id == palette_id:
                return palette
        return None

    def add(self, palette):
        self._palettes.append(palette)
        self._save()

    def update(self, palette_id, **changes):
        """Merge changes (Palette field names) into a saved palette.

        Returns False when the id is unknown or a change names no Palette field.
        """
        if not set(changes) <= set(Palette._fields):
            return False
        for i, palette in enumerate(self._palettes):
            if palette.id == palette_id:
                self._palettes[i] = palette._replace(**changes)
                self._save()
                return True
        return False

    def remove(self, palette_id):
        before = len(self._palettes)
        self._palettes = [p for p in self._palettes if p.id != palette_id]
        if len(self._palettes) != before:
            self._save()
            return True
        return False

    def clear(self):
        self._palettes = []
        self._save()

    def add_color_to_palette(self, palette_id, hex_color):
        palette = self.get_by_id(palette_id)
        if palette is None:
            return False
        return self.update(palette_id, colors=add_color(palette, hex_color).colors)

    def remove_color_from_palette(self, palette_id, index):
        palette = self.get_by_id(palette_id)
        if palette is None:
            return False
        edited = remove_color(palette, index)
        if edited is None:
            return False
        return self.update(palette_id, colors=edited.colors)
