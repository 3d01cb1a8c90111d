"""
Randomized storage keys for uploaded dossier images.

Format: {base36_random}.{ext}
- 16 chars base36 = 36^16 possible keys, collisions are not a practical concern
- the original file extension is preserved (lowercased) so storage serves
  the right content type
"""
import secrets
import re
from typing import Optional

# Base36 alphabet (lowercase letters + digits)
ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
BASE = len(ALPHABET)  # 36

KEY_LENGTH = 16

EXTENSION_PATTERN = re.compile(r'^[0-9a-z]{1,10}$')


def _random_base36(length: int = KEY_LENGTH) -> str:
    """Generate random base36 string"""
    result = []
    for _ in range(length):
        result.append(ALPHABET[secrets.randbelow(BASE)])
    return ''.join(result)


def file_extension(filename: Optional[str]) -> Optional[str]:
    """
    Extension of an uploaded file name, lowercased.

    Returns None for names without a usable extension ("photo", ".env",
    "archive.").
    """
    if not filename or '.' not in filename:
        return None
    stem, _, ext = filename.rpartition('.')
    ext = ext.lower()
    if not stem or not EXTENSION_PATTERN.match(ext):
        return None
    return ext


def generate_storage_key(filename: Optional[str]) -> str:
    """
    Generate a new storage key for an uploaded file.

    Args:
        filename: original file name (only the extension is kept)

    Returns:
        Key like 'x5b8r2yjq0m3k1zt.png'
    """
    random_part = _random_base36(KEY_LENGTH)
    ext = file_extension(filename)
    return f"{random_part}.{ext}" if ext else random_part

