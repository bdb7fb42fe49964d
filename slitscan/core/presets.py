"""
Slit Presets Library - Named slit geometries
Lets users reuse a slit width / frame count / spacing combination with a single flag
"""

import yaml
import logging
from pathlib import Path
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field, asdict

from ..procedural.base import SlitParameters


logger = logging.getLogger(__name__)


# ============================================================================
# Preset Data Structures
# ============================================================================

@dataclass
class SlitPreset:
    """A single slit geometry preset"""

    name: str
    description: str = ""

    slit_width: int = 5
    frame_count: int = 8
    slit_spacing: Optional[int] = None  # None = frame_count * slit_width

    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for YAML serialization"""
        return {k: v for k, v in asdict(self).items() if v is not None and v != [] and v != ""}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SlitPreset':
        """Create from dictionary"""
        # Short keys used in hand-written files
        aliases = {'width': 'slit_width', 'frames': 'frame_count', 'spacing': 'slit_spacing'}
        data = {aliases.get(k, k): v for k, v in data.items()}

        # Filter to valid fields
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_fields}

        return cls(**filtered)

    def to_parameters(self) -> SlitParameters:
        if self.slit_spacing is None:
            params = SlitParameters.derived(self.slit_width, self.frame_count)
        else:
            params = SlitParameters(self.slit_width, self.slit_spacing, self.frame_count)
        return params.validate()


# ============================================================================
# Built-in Presets
# ============================================================================

BUILTIN_PRESETS: Dict[str, Dict[str, Any]] = {
    "default": {
        "description": "Five pixel slits across eight frames",
        "slit_width": 5,
        "frame_count": 8,
        "tags": ["general"],
    },
    "fine": {
        "description": "Narrow two pixel slits across five frames",
        "slit_width": 2,
        "frame_count": 5,
        "tags": ["general", "detail"],
    },
    "bold": {
        "description": "Wide ten pixel bands from four frames, readable at a distance",
        "slit_width": 10,
        "frame_count": 4,
        "tags": ["print", "poster"],
    },
    "dense": {
        "description": "Single pixel slits across twelve frames for smooth motion",
        "slit_width": 1,
        "frame_count": 12,
        "tags": ["detail", "smooth"],
    },
    "tiled": {
        "description": "Four frames whose bands tile every column with no gaps",
        "slit_width": 3,
        "frame_count": 4,
        "slit_spacing": 9,
        "tags": ["general", "print"],
    },
}


# ============================================================================
# Preset Manager
# ============================================================================

class PresetManager:
    """
    Manages loading, saving, and looking up slit presets.
    """

    def __init__(self, user_presets_dir: Optional[Path] = None):
        """
        Initialize preset manager.

        Args:
            user_presets_dir: Directory for user presets (default: ~/.slitscan/presets)
        """
        self.user_presets_dir = Path(user_presets_dir or Path.home() / '.slitscan' / 'presets')

        self._builtin: Dict[str, SlitPreset] = {}
        self._user: Dict[str, SlitPreset] = {}

        self._load_builtin_presets()
        self._load_user_presets()

    def _load_builtin_presets(self) -> None:
        """Load built-in presets"""
        for name, data in BUILTIN_PRESETS.items():
            self._builtin[name] = SlitPreset.from_dict({**data, 'name': name})

    def _load_user_presets(self) -> None:
        """Load user-defined presets from YAML files"""
        if not self.user_presets_dir.is_dir():
            return

        for yaml_file in sorted(self.user_presets_dir.glob('*.yaml')):
            try:
                with open(yaml_file, 'r') as f:
                    data = yaml.safe_load(f)

                if isinstance(data, dict):
                    if 'presets' in data:
                        # Multiple presets in one file
                        for name, preset_data in data['presets'].items():
                            preset_data['name'] = name
                            self._user[name] = SlitPreset.from_dict(preset_data)
                    else:
                        # Single preset
                        name = yaml_file.stem
                        data['name'] = name
                        self._user[name] = SlitPreset.from_dict(data)
            except (OSError, yaml.YAMLError, TypeError, AttributeError) as e:
                logger.warning("Could not load preset file %s: %s", yaml_file, e)

    def get(self, name: str) -> Optional[SlitPreset]:
        """
        Get a preset by name.
        User presets override built-in presets with same name.
        """
        return self._user.get(name) or self._builtin.get(name)

    def exists(self, name: str) -> bool:
        return name in self._user or name in self._builtin

    def list_all(self) -> List[str]:
        """List all preset names"""
        return sorted(set(self._builtin.keys()) | set(self._user.keys()))

    def list_by_tag(self, tag: str) -> List[str]:
        """List presets with a specific tag"""
        matches = []
        for name, preset in {**self._builtin, **self._user}.items():
            if tag.lower() in [t.lower() for t in preset.tags]:
                matches.append(name)
        return sorted(matches)

    def list_tags(self) -> List[str]:
        tags = set()
        for preset in {**self._builtin, **self._user}.values():
            tags.update(preset.tags)
        return sorted(tags)

    def save_preset(self, preset: SlitPreset, filename: Optional[str] = None) -> Path:
        """
        Save a user preset to YAML file.

        Args:
            preset: The preset to save
            filename: Optional filename (default: preset.name.yaml)

        Returns:
            Path to saved file
        """
        preset.to_parameters()

        filename = filename or f"{preset.name}.yaml"
        if not filename.endswith('.yaml'):
            filename += '.yaml'

        self.user_presets_dir.mkdir(parents=True, exist_ok=True)
        filepath = self.user_presets_dir / filename

        with open(filepath, 'w') as f:
            yaml.dump(preset.to_dict(), f, default_flow_style=False, sort_keys=False)

        self._user[preset.name] = preset

        return filepath

    def delete_preset(self, name: str) -> bool:
        """
        Delete a user preset.

        Returns:
            True if deleted, False if not found or is builtin
        """
        if name not in self._user:
            return False

        for yaml_file in self.user_presets_dir.glob('*.yaml'):
            if yaml_file.stem == name:
                yaml_file.unlink()
                break

        del self._user[name]
        return True


# Global manager, created on first use
_manager: Optional[PresetManager] = None


def get_preset_manager() -> PresetManager:
    global _manager
    if _manager is None:
        _manager = PresetManager()
    return _manager


def get_preset(name: str) -> Optional[SlitPreset]:
    """Shortcut to look up a preset on the global manager"""
    return get_preset_manager().get(name)
