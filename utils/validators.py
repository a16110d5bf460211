from typing import Optional


class TextValidator:
    """Presence checks for free-text fields entered at the prompt."""

    @staticmethod
    def clean(text: Optional[str]) -> str:
        if text is None:
            return ""
        return text.strip()

    @staticmethod
    def is_present(text: Optional[str]) -> bool:
        return bool(TextValidator.clean(text))
