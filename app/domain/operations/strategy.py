"""
Strategy classification rules.

The model is asked for a bare strategy name. Replies that are too long
or that read like a refusal are not stored as strategies.
"""

from decimal import Decimal
from typing import Optional

MAX_STRATEGY_LEN = 50
DEFAULT_CONFIDENCE = Decimal("0.85")

SYSTEM_PROMPT = """You classify trading strategies.
Given one operation, name the most likely strategy among:
- Abertura de Posição (AP): position opened at the start of the session
- Tape Reading: order flow reading
- Breakout: break of an important level
- Reversão: trade against the trend
- Scalping: very fast trades
- Price Action: price action analysis
- Suporte/Resistência: trades at key levels

Reply ONLY with the strategy name."""

REFUSAL_MARKERS = (
    "não é possível",
    "não foi possível",
    "informações fornecidas",
    "não são suficientes",
    "não classificado",
    "impossível determinar",
    "cannot determine",
    "not possible",
)


def operation_prompt(
    asset: str,
    result: Decimal,
    contracts: int,
    costs: Decimal,
    notes: Optional[str],
) -> str:
    return (
        f"Ativo: {asset}\n"
        f"Resultado: R$ {result}\n"
        f"Contratos: {contracts}\n"
        f"Custos: R$ {costs}\n"
        f"Notas: {notes or 'Sem notas'}\n\n"
        "Qual estratégia foi utilizada?"
    )


def clean_strategy(reply: Optional[str]) -> Optional[str]:
    """Return the strategy name, or None when the reply is not usable."""
    strategy = (reply or "").strip()
    if not strategy or len(strategy) > MAX_STRATEGY_LEN:
        return None
    lowered = strategy.lower()
    if any(marker in lowered for marker in REFUSAL_MARKERS):
        return None
    return strategy
