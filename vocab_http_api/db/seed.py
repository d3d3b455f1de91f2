# vocab_http_api/db/seed.py

"""
Default language catalog inserted on first startup.
"""

from typing import List, Tuple

# (name, flag)
DEFAULT_LANGUAGES: List[Tuple[str, str]] = [
    ("English", "🇬🇧"),
    ("Spanish", "🇪🇸"),
    ("French", "🇫🇷"),
    ("German", "🇩🇪"),
    ("Chinese", "🇨🇳"),
    ("Japanese", "🇯🇵"),
    ("Russian", "🇷🇺"),
    ("Portuguese", "🇵🇹"),
    ("Italian", "🇮🇹"),
]
