from typing import Optional
import re


PRODUCT_ID_PATTERN = re.compile(r"[0-9a-f]{32}")


def validate_product_id(product_id: Optional[str]) -> bool:
    if not product_id:
        return False

    return PRODUCT_ID_PATTERN.fullmatch(product_id) is not None


def sanitize_image_name(image: str) -> str:
    """Ne garde que le nom de fichier (tout ce qui suit le dernier séparateur)."""
    name = image.strip().replace("\\", "/").rstrip("/")
    return name.rsplit("/", 1)[-1]


def sanitize_search_query(query: str) -> str:
    return re.sub(r"[^\w\s\-]", "", query).strip()


def is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def escape_like(value: str, escape: str = "\\") -> str:
    """Neutralise les jokers LIKE (``%`` et ``_``) d'une saisie utilisateur."""
    return (
        value.replace(escape, escape * 2)
        .replace("%", f"{escape}%")
        .replace("_", f"{escape}_")
    )
