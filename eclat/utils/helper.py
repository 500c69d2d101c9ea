import datetime
import random
import string
import uuid

_BASE36 = string.digits + string.ascii_uppercase


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def today_iso() -> str:
    # Reservation dates are plain YYYY-MM-DD strings compared against the UTC day
    return utcnow().date().isoformat()


def to_base36(number: int) -> str:
    if number < 0:
        raise ValueError("base36 only encodes non-negative numbers")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def new_id() -> str:
    return str(uuid.uuid4())


def generate_order_number(now: datetime.datetime = None) -> str:
    """ORD-<base36 millisecond timestamp>-<4 random base36 chars>."""
    now = now or utcnow()
    millis = int(now.timestamp() * 1000)
    suffix = "".join(random.choice(_BASE36) for _ in range(4))
    return f"ORD-{to_base36(millis)}-{suffix}"


def generate_reservation_code(now: datetime.datetime = None) -> str:
    now = now or utcnow()
    return f"RES-{now.year}-{random.randint(1000, 9999)}"
