"""Domain constants: the closed set of selectable currencies and fixed messages."""

from typing import Dict, Tuple

PIVOT_CURRENCY = "USD"

# Ordered as shown in the selectors.
CURRENCY_NAMES: Dict[str, str] = {
    "ARS": "Peso Argentino",
    "BOB": "Boliviano",
    "BRL": "Real Brasileño",
    "CLP": "Peso Chileno",
    "COP": "Peso Colombiano",
    "USD": "Dólar Estadounidense",
}
CURRENCIES: Tuple[str, ...] = tuple(CURRENCY_NAMES)

DEFAULT_FROM_CURRENCY = "USD"
DEFAULT_TO_CURRENCY = "ARS"

RATE_FETCH_ERROR_MESSAGE = (
    "Error al obtener las tasas de cambio. Por favor, intente nuevamente."
)
