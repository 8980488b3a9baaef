from typing import Dict, Union

# A display string, either plain or keyed by locale: {"es": "...", "en": "..."}
LocalizedText = Union[str, Dict[str, str]]

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
