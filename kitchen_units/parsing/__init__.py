from .quantity import (
    UNICODE_FRACTIONS,
    ParsedQuantity,
    parse_number,
    parse_amount,
    split_amount,
    extract_unit,
)

__all__ = ["UNICODE_FRACTIONS", "ParsedQuantity", "parse_number", "parse_amount", "split_amount", "extract_unit"]
