"""Settings module for configuring the markdown IME renderers."""

from dataclasses import dataclass, field
import json
from typing import Any, Dict, List

from markdown_ime.markdown_ime_exceptions import MarkdownIMESettingsError


# Canonical priority order; a line starting with ">" must never be read as a list marker
BLOCK_CONTAINER_NAMES = [
    "blockquote",
    "header text",
    "hr",
    "ordered list",
    "unordered list"
]

MAX_SUPPORTED_HEADER_LEVEL = 6


@dataclass
class InlineElementSettings:
    """Configuration for one bracket-delimited inline element."""
    tag_name: str
    left_bracket: str
    right_bracket: str | None = None
    attributes: Dict[str, str] = field(default_factory=dict)


@dataclass
class MarkdownIMESettings:
    """
    Settings for the block and inline renderers.
    """
    block_containers: List[str] = field(default_factory=lambda: list(BLOCK_CONTAINER_NAMES))
    max_header_level: int = MAX_SUPPORTED_HEADER_LEVEL
    inline_elements: List[InlineElementSettings] = field(
        default_factory=lambda: [InlineElementSettings(tag_name="em", left_bracket="*")]
    )

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Check that all settings hold usable values.

        Raises:
            MarkdownIMESettingsError: If any value is invalid
        """
        unknown = [name for name in self.block_containers if name not in BLOCK_CONTAINER_NAMES]
        if unknown:
            raise MarkdownIMESettingsError(
                f"Unknown block container(s): {', '.join(unknown)}",
                {'setting': 'block_containers', 'unknown': unknown, 'valid': BLOCK_CONTAINER_NAMES}
            )

        level = self.max_header_level
        if isinstance(level, bool) or not isinstance(level, int) or not 1 <= level <= MAX_SUPPORTED_HEADER_LEVEL:
            raise MarkdownIMESettingsError(
                f"max_header_level must be between 1 and {MAX_SUPPORTED_HEADER_LEVEL}",
                {'setting': 'max_header_level', 'value': self.max_header_level}
            )

        for index, element in enumerate(self.inline_elements):
            if not element.tag_name or not element.left_bracket:
                raise MarkdownIMESettingsError(
                    "Inline elements need a tag name and a left bracket",
                    {'setting': 'inline_elements', 'index': index}
                )

    @classmethod
    def create_default(cls) -> "MarkdownIMESettings":
        """Create a new settings object with default values."""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MarkdownIMESettings":
        """
        Build settings from a dictionary, using defaults for missing keys.

        Args:
            data: Settings values, as stored in a settings file

        Returns:
            MarkdownIMESettings object with loaded values

        Raises:
            MarkdownIMESettingsError: If the data contains invalid values
        """
        settings = cls.create_default()

        if "blockContainers" in data:
            settings.block_containers = list(data["blockContainers"])

        if "maxHeaderLevel" in data:
            settings.max_header_level = data["maxHeaderLevel"]

        if "inlineElements" in data:
            try:
                settings.inline_elements = [
                    InlineElementSettings(
                        tag_name=element["tagName"],
                        left_bracket=element["leftBracket"],
                        right_bracket=element.get("rightBracket"),
                        attributes=dict(element.get("attributes", {}))
                    )
                    for element in data["inlineElements"]
                ]

            except (KeyError, TypeError) as e:
                raise MarkdownIMESettingsError(
                    f"Invalid inline element definition: {e}",
                    {'setting': 'inline_elements'}
                ) from e

        settings.validate()
        return settings

    @classmethod
    def load(cls, path: str) -> "MarkdownIMESettings":
        """
        Load settings from file.

        Args:
            path: Path to the settings file

        Returns:
            MarkdownIMESettings object with loaded values

        Raises:
            json.JSONDecodeError: If file contains invalid JSON
            MarkdownIMESettingsError: If the file contains invalid values
        """
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert settings to the dictionary form used in settings files.

        Returns:
            Dictionary of settings values
        """
        return {
            "blockContainers": list(self.block_containers),
            "maxHeaderLevel": self.max_header_level,
            "inlineElements": [
                {
                    "tagName": element.tag_name,
                    "leftBracket": element.left_bracket,
                    "rightBracket": element.right_bracket,
                    "attributes": dict(element.attributes)
                }
                for element in self.inline_elements
            ]
        }

    def save(self, path: str) -> None:
        """
        Save settings to file.

        Args:
            path: Path to save settings file
        """
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2)
