from dataclasses import dataclass
from enum import Enum

from .exceptions import ProductNameError

MIN_LENGTH = 2
MAX_LENGTH = 100

# Substring match only. Easy to get around; not a security boundary.
DENYLIST = ('bomb', 'explosive', 'weapon', 'poison', 'synthesis')


class ProductNameErrorKind(str, Enum):
    MISSING = 'missing'
    TOO_SHORT = 'too_short'
    TOO_LONG = 'too_long'
    DISALLOWED = 'disallowed'


MESSAGES = {
    ProductNameErrorKind.MISSING: 'Product name is required',
    ProductNameErrorKind.TOO_SHORT: 'Product name is too short',
    ProductNameErrorKind.TOO_LONG: 'Product name is too long',
    ProductNameErrorKind.DISALLOWED: 'Unable to analyze this product',
}


@dataclass(frozen=True)
class ProductName:
    value: str

    def __str__(self):
        return self.value


def _reject(kind):
    raise ProductNameError(kind, MESSAGES[kind])


def validate_product_name(value) -> ProductName:
    if not value or not isinstance(value, str):
        _reject(ProductNameErrorKind.MISSING)

    trimmed = value.strip()
    if len(trimmed) < MIN_LENGTH:
        _reject(ProductNameErrorKind.TOO_SHORT)

    if len(value) > MAX_LENGTH:
        _reject(ProductNameErrorKind.TOO_LONG)

    lowered = value.lower()
    if any(term in lowered for term in DENYLIST):
        _reject(ProductNameErrorKind.DISALLOWED)

    return ProductName(trimmed)


def client_rules():
    """Limits and messages the browser mirrors for immediate feedback."""
    return {
        'minLength': MIN_LENGTH,
        'maxLength': MAX_LENGTH,
        'denylist': list(DENYLIST),
        'messages': {kind.value: message for kind, message in MESSAGES.items()},
    }
