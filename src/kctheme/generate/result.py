"""
Result of a theme generation run.
"""

from dataclasses import dataclass, field
from pathlib import Path

from kctheme.core.constants import ThemeType


@dataclass
class ThemeGenerationResult:
    """
    What a generation run produced.

    Attributes:
        files_created: Files written, in write order
        theme_types: Variants that had sources and were generated
        email_copied: Whether the email theme was copied
        css_globals: Accumulated CSS globals handed to page templates
    """

    files_created: list[Path] = field(default_factory=list)
    theme_types: list[ThemeType] = field(default_factory=list)
    email_copied: bool = False
    css_globals: dict[str, str] = field(default_factory=dict)

    def add_file(self, path: Path) -> None:
        """Record a file that was written."""
        self.files_created.append(path)

    def add_files(self, paths: list[Path]) -> None:
        self.files_created.extend(paths)

    def files_under(self, dir_path: Path) -> list[Path]:
        return [p for p in self.files_created if dir_path in p.parents]
