from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional, Union
import re

from daraza_core.errors import DEFAULT_MESSAGES, ErrorKind

Number = Union[int, float, Decimal, str]

MAX_AMOUNT = Decimal("1000000")
NOTE_MAX_LEN = 255
PHONE_PATTERN = re.compile(r"^[0-9]{10,14}$")
RTP_METHOD = 1


def to_decimal(value: Any) -> Optional[Decimal]:
    if isinstance(value, bool) or value is None:
        return None
    try:
        d = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    if not d.is_finite():
        return None
    return d


def json_number(d: Decimal) -> Union[int, float]:
    return int(d) if d == d.to_integral_value() else float(d)


@dataclass
class PaymentRequest:
    """Amount, payer phone and note for a request-to-pay or remittance."""
    amount: Number
    phone: str
    note: str

    def validate(self) -> Optional[ErrorKind]:
        amount = to_decimal(self.amount)
        if amount is None or amount <= 0 or amount > MAX_AMOUNT:
            return ErrorKind.INVALID_AMOUNT
        if not isinstance(self.phone, str) or not PHONE_PATTERN.fullmatch(self.phone):
            return ErrorKind.INVALID_PHONE
        if not isinstance(self.note, str) or not self.note or len(self.note) > NOTE_MAX_LEN:
            return ErrorKind.INVALID_NOTE
        return None

    def to_payload(self) -> Dict[str, Any]:
        return {
            "method": RTP_METHOD,
            "amount": json_number(to_decimal(self.amount)),
            "phone": self.phone,
            "note": self.note,
        }


def validate_percentage(percentage: Any) -> Optional[ErrorKind]:
    p = to_decimal(percentage)
    if p is None or p <= 0 or p > 100:
        return ErrorKind.INVALID_PERCENTAGE
    return None


def error_result(kind: ErrorKind, message: Optional[str] = None, details: Optional[str] = None) -> Dict[str, Any]:
    result = {
        "status": "error",
        "message": message or DEFAULT_MESSAGES[kind],
        "error": kind.value,
    }
    if details:
        result["details"] = details
    return result


def _field_equals(body: Dict[str, Any], value: str) -> bool:
    for name in ("code", "status"):
        field = body.get(name)
        if isinstance(field, str) and field.lower() == value:
            return True
    return False


def is_error(body: Any) -> bool:
    return isinstance(body, dict) and _field_equals(body, "error")


def is_success(body: Any) -> bool:
    """
    The provider reports success as either code == "Success" or
    status == "success" depending on the endpoint; both are accepted in
    any casing.
    """
    return isinstance(body, dict) and not is_error(body) and _field_equals(body, "success")
