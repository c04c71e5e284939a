import math
from pydantic import BaseModel, ConfigDict
from typing import Optional, Dict, Any, List

# Required on create. The first group must be truthy, the second only present,
# so price=0 and inStock=false are accepted.
TRUTHY_FIELDS = ("name", "description", "category")
PRESENT_FIELDS = ("price", "inStock")

# ---------------------------
# Loose-typing helpers
# ---------------------------
def js_truthy(value: Any) -> bool:
    """Falsy: None, False, 0, NaN and "". Empty lists and objects count as truthy."""
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True

def js_string(value: Any) -> str:
    """String form of a JSON value as used for object keys: 1 and "1" collide."""
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, list):
        # nulls inside arrays join as empty strings
        return ",".join("" if v is None else js_string(v) for v in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)

def as_fields(body: Any) -> Dict[str, Any]:
    """Fields a JSON body contributes when spread into a record; arrays spread by index."""
    if isinstance(body, dict):
        return body
    if isinstance(body, list):
        return {str(i): v for i, v in enumerate(body)}
    return {}

class ProductIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Any = None
    description: Any = None
    price: Any = None
    category: Any = None
    inStock: Any = None

    @classmethod
    def from_body(cls, body: Any) -> "ProductIn":
        # non-object bodies carry no named fields
        return cls.model_validate(body if isinstance(body, dict) else {})

    def missing_fields(self) -> List[str]:
        missing = [f for f in TRUTHY_FIELDS if not js_truthy(getattr(self, f))]
        missing += [f for f in PRESENT_FIELDS if f not in self.model_fields_set]
        return missing

def _make_product_dict(product_id: str, p: ProductIn) -> Dict[str, Any]:
    return {
        "id": product_id,
        "name": p.name,
        "description": p.description,
        "price": p.price,
        "category": p.category,
        "inStock": p.inStock
    }

# ---------------------------
# Pagination helpers
# ---------------------------
def to_number(raw: Any, default: float) -> float:
    """
    Coerce a query-string value to a number the way a loosely typed client
    would: missing -> default, blank -> 0, unparsable -> NaN.
    """
    if raw is None:
        return float(default)
    if isinstance(raw, (int, float)):
        return float(raw)
    text = str(raw).strip()
    if not text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return math.nan

def json_number(value: float) -> Optional[float]:
    # NaN and infinities have no JSON form; they serialize as null.
    if not math.isfinite(value):
        return None
    if value.is_integer():
        return int(value)
    return value

def _relative_index(value: float, length: int) -> int:
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return length if value > 0 else 0
    idx = int(value)
    if idx < 0:
        return max(length + idx, 0)
    return min(idx, length)

def window(items: List[Any], start: float, end: float) -> List[Any]:
    """Slice with loose numeric bounds: NaN counts as 0, negatives count from the end."""
    length = len(items)
    lo = _relative_index(start, length)
    hi = _relative_index(end, length)
    if hi <= lo:
        return []
    return items[lo:hi]

def paginate(items: List[Any], page: float, limit: float) -> List[Any]:
    start = (page - 1) * limit
    return window(items, start, start + limit)
