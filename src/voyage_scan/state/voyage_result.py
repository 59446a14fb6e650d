"""
Result objects produced by the Voyage pipeline.
"""

from typing import Dict, Optional

from ..processing.constants import SKILL_NAMES
from ..stars.star_classifier import StarMarker


class SkillEntry:
    """Value and star marker read for one skill."""

    def __init__(self, value: int = 0, marker: StarMarker = StarMarker.NONE):
        self.value = value
        self.marker = marker

    def __repr__(self) -> str:
        return f"SkillEntry(value={self.value}, marker={self.marker.name})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, SkillEntry):
            return NotImplemented
        return self.value == other.value and self.marker == other.marker

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'skillValue': self.value,
            'primary': int(self.marker),
        }


class VoyageResult:
    """
    Everything read from one Voyage screenshot.

    Attributes:
        antimatter: Antimatter count (0 when unread).
        skills: Skill name -> SkillEntry, always holding all six skills.
        input_width: Width of the analysed image.
        input_height: Height of the analysed image.
        file_size: Size of the encoded source in bytes (0 if unknown).
        valid: True only when both the antimatter and skill stages succeeded.
        error: Failure description; set exactly when ``valid`` is False.
    """

    def __init__(self, input_width: int = 0, input_height: int = 0, file_size: int = 0):
        self.antimatter: int = 0
        self.skills: Dict[str, SkillEntry] = {name: SkillEntry() for name in SKILL_NAMES}
        self.input_width = input_width
        self.input_height = input_height
        self.file_size = file_size
        self.valid: bool = False
        self.error: Optional[str] = None

    def __getitem__(self, skill: str) -> SkillEntry:
        return self.skills[skill]

    def fail(self, error: str) -> 'VoyageResult':
        """Mark the result invalid with ``error`` and return it."""
        self.valid = False
        self.error = error
        return self

    def to_dict(self) -> dict:
        """Convert result to the serialized document layout."""
        doc = {
            'input_width': self.input_width,
            'input_height': self.input_height,
            'error': self.error or '',
            'antimatter': self.antimatter,
            'valid': self.valid,
            'fileSize': self.file_size,
        }
        for name in SKILL_NAMES:
            doc[name] = self.skills[name].to_dict()
        return doc

    def __repr__(self) -> str:
        status = 'valid' if self.valid else f'error={self.error!r}'
        return f"VoyageResult(antimatter={self.antimatter}, {status})"
