from decimal import Decimal, InvalidOperation
from typing import Optional

from recipe_ingest.app.services.url_parsing.parsing_utils import normalize_fraction_display


def parse_quantity(raw: Optional[str]) -> Optional[float]:
    """Parse "2", "0.5", "1/2", "1 1/2" or "1½" into a float; None if unparseable."""
    if raw is None:
        return None
    value = normalize_fraction_display(raw.strip())
    if not value:
        return None

    # Whole or decimal numbers
    try:
        if "/" not in value and " " not in value:
            number = Decimal(value)
            return float(number) if number.is_finite() else None
    except InvalidOperation:
        return None

    # Fractions like "1/2" or "1 1/2"
    try:
        if " " in value:
            whole_part, frac_part = value.split(" ", 1)
            whole = Decimal(whole_part)
            num_str, denom_str = frac_part.split("/", 1)
            num = Decimal(num_str)
            denom = Decimal(denom_str)
            if denom == 0:
                return None
            return float(whole + (num / denom))
        if "/" in value:
            num_str, denom_str = value.split("/", 1)
            num = Decimal(num_str)
            denom = Decimal(denom_str)
            if denom == 0:
                return None
            return float(num / denom)
    except (InvalidOperation, ValueError):
        return None

    return None
