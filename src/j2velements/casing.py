"""Key-case conversion — camelCase object keys to kebab-case.

The downstream API names every multi-word property in kebab-case
("fade-in", "z-index"), while form fields arrive in camelCase.
"""

import re

_UPPER = re.compile(r"[A-Z]")


def kebab_key(key: str) -> str:
    """Insert '-' before each uppercase letter and lowercase it.

    A leading uppercase letter yields a leading hyphen:
    "PascalCase" -> "-pascal-case".
    """
    return _UPPER.sub(lambda m: f"-{m.group(0).lower()}", key)


def convert_camel_to_kebab(value):
    """Recursively rewrite every dict key in value to kebab-case.

    Lists are converted element-wise, dicts key-by-key. Primitives
    (str, int, float, bool, None) are returned unchanged.
    """
    if isinstance(value, dict):
        return {
            kebab_key(k) if isinstance(k, str) else k: convert_camel_to_kebab(v)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [convert_camel_to_kebab(item) for item in value]
    return value
