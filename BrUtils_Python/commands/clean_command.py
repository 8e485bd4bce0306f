"""Clean command - normalize spaces and accents of a text."""
from typing import Optional

from rich.console import Console

from ..config import get_config
from ..utils.text_utils import TextUtils

console = Console()


class CleanCommand:
    """Clean a text using the configured defaults."""

    def __init__(
        self,
        text: str,
        remove_repeated_spaces: Optional[bool] = None,
        remove_accents: Optional[bool] = None,
        strict: Optional[bool] = None,
    ):
        settings = get_config().text
        self.text = text
        self.remove_repeated_spaces = settings.remove_repeated_spaces if remove_repeated_spaces is None else remove_repeated_spaces
        self.remove_accents = settings.remove_accents if remove_accents is None else remove_accents
        self.strict = settings.strict_accents if strict is None else strict

    def execute(self) -> int:
        """Execute the clean command."""
        cleaned = TextUtils.clean_text(self.text, self.remove_repeated_spaces, self.remove_accents, self.strict)
        console.print(cleaned, markup=False, highlight=False)
        return 0
