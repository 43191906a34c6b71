from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from conversor.models.constants import CURRENCY_NAMES, PIVOT_CURRENCY
from conversor.models.rates import (
    ConversionIn,
    ConversionOut,
    CurrencyList,
    CurrencyOut,
    RatesOut,
)
from conversor.services.session import ConverterSession

"""JSON API over the converter session.

Endpoints:
    - GET  /api/currencies -> the six selectable currencies
    - GET  /api/rates      -> rate state (status, loading flag, table, error)
    - POST /api/convert    -> converted amount or null when not ready

Conversion never errors for an unparseable amount or unloaded rates; the
result is simply null. Unsupported codes are rejected by validation (422).
"""

router = APIRouter(prefix="/api", tags=["rates"])


def get_session(request: Request) -> ConverterSession:
    return request.app.state.session


@router.get("/currencies", response_model=CurrencyList, summary="List supported currencies")
async def list_currencies() -> CurrencyList:
    return CurrencyList(
        currencies=[CurrencyOut(code=c, name=n) for c, n in CURRENCY_NAMES.items()]
    )


@router.get("/rates", response_model=RatesOut, summary="Current exchange rates state")
async def get_rates(session: ConverterSession = Depends(get_session)) -> RatesOut:
    return RatesOut(
        status=session.state.status,
        loading=session.loading,
        base_currency=PIVOT_CURRENCY,
        rates=session.rates,
        last_updated=session.last_updated,
        error=session.error_message,
    )


@router.post("/convert", response_model=ConversionOut, summary="Convert an amount")
async def convert_amount(
    payload: ConversionIn,
    session: ConverterSession = Depends(get_session),
) -> ConversionOut:
    result = session.convert(payload.amount, payload.from_currency, payload.to_currency)
    return ConversionOut(
        amount=payload.amount,
        from_currency=payload.from_currency,
        to_currency=payload.to_currency,
        result=result.converted if result else None,
        summary=result.summary if result else None,
    )
