"""
Brokerage note extraction rules.

Detects which broker issued a note, builds the extraction prompt, and
turns the model's free-text reply into validated operation drafts.
The reply is expected to contain a JSON array, possibly wrapped in
markdown or prose, so parsing looks for the outermost bracketed span
before decoding it.
"""

import json
import re
from datetime import date, time
from decimal import Decimal, InvalidOperation
from typing import Any

from app.domain.operations.entities import OperationDraft, RiskLevel, Side
from app.domain.operations.errors import UnparseableNoteError

GENERIC_BROKER = "generic"
HIGH_RISK_RESULT = Decimal("300")
DEFAULT_TIME = time(9, 0, 0)

BROKER_PATTERNS: dict[str, re.Pattern[str]] = {
    "clear": re.compile(r"clear|clear corretora", re.IGNORECASE),
    "xp": re.compile(r"xp investimentos|xp corretora", re.IGNORECASE),
    "btg": re.compile(r"btg pactual", re.IGNORECASE),
    "modal": re.compile(r"modal mais", re.IGNORECASE),
    "rico": re.compile(r"rico corretora", re.IGNORECASE),
    "inter": re.compile(r"inter dtvm", re.IGNORECASE),
    "ativa": re.compile(r"ativa investimentos", re.IGNORECASE),
    "genial": re.compile(r"genial investimentos", re.IGNORECASE),
}

_JSON_ARRAY = re.compile(r"\[[\s\S]*\]")


def detect_broker(content: str) -> str:
    """Return the first broker whose pattern matches, else 'generic'."""
    for broker, pattern in BROKER_PATTERNS.items():
        if pattern.search(content):
            return broker
    return GENERIC_BROKER


def extraction_prompt(broker: str) -> str:
    return f"""You extract trades from Brazilian brokerage notes (notas de corretagem).
Detected broker format: {broker.upper()}

Conventions:
- Dates are DD/MM/YYYY or DD/MM/YY, times HH:MM or HH:MM:SS.
- Tickers are usually 4-6 characters (WDOQ24, WING24, ...).
- C = buy (Compra), V = sell (Venda).
- Amounts use a comma as decimal separator (R$ 1.234,56).

For every operation return an object:
{{
  "ticker": "asset code",
  "type": "C" or "V",
  "qty": integer number of contracts,
  "price": average price,
  "result": net result after costs (negative for a loss),
  "date": "YYYY-MM-DD",
  "time": "HH:MM:SS",
  "broker": "{broker}",
  "costs": total costs
}}

Reply ONLY with a JSON array of these objects, or [] when there are none."""


def extract_json_array(reply: str) -> list[dict[str, Any]]:
    """Decode the JSON array embedded in a model reply.

    Raises:
        UnparseableNoteError: If no array can be decoded.
    """
    match = _JSON_ARRAY.search(reply or "")
    candidate = match.group(0) if match else (reply or "")
    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError as exc:
        raise UnparseableNoteError("reply is not valid JSON") from exc
    if not isinstance(parsed, list):
        raise UnparseableNoteError("reply is not a JSON array")
    return [item for item in parsed if isinstance(item, dict)]


def _to_decimal(value: Any) -> Decimal | None:
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return number if number.is_finite() else None


def _to_int(value: Any) -> int | None:
    number = _to_decimal(value)
    return int(number) if number is not None else None


def _to_qty(value: Any) -> int:
    """Contract count; missing, non-numeric or non-positive values become 1."""
    qty = _to_int(value)
    return qty if qty is not None and qty > 0 else 1


def _to_date(value: Any, fallback: date) -> date:
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        return fallback


def _to_time(value: Any) -> time:
    try:
        return time.fromisoformat(str(value))
    except ValueError:
        return DEFAULT_TIME


def risk_level(result: Decimal | None) -> RiskLevel:
    if result is not None and abs(result) > HIGH_RISK_RESULT:
        return RiskLevel.HIGH
    return RiskLevel.MEDIUM


def draft_from_raw(raw: dict[str, Any], broker: str, today: date) -> OperationDraft:
    """Normalize one extracted object, filling defaults for missing or
    non-numeric fields."""
    result = _to_decimal(raw.get("result"))
    side = Side.SELL if raw.get("type") == Side.SELL.value else Side.BUY
    return OperationDraft(
        ticker=str(raw.get("ticker") or "UNKNOWN"),
        type=side,
        qty=_to_qty(raw.get("qty")),
        price=_to_decimal(raw.get("price")) or Decimal("0"),
        result=result or Decimal("0"),
        date=_to_date(raw.get("date"), today),
        time=_to_time(raw.get("time")),
        broker=str(raw.get("broker") or broker),
        costs=_to_decimal(raw.get("costs")) or Decimal("0"),
        risk_level=risk_level(result),
        notes=(
            f"Importado via {broker}. Tipo: {raw.get('type')}. "
            f"Preço: R$ {raw.get('price')}"
        ),
    )
