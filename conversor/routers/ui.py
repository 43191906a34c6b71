from pathlib import Path
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request, Form
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from conversor.models.constants import CURRENCIES, CURRENCY_NAMES
from conversor.services.session import ConversionForm, ConverterSession

router = APIRouter(tags=["ui"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def get_session(request: Request) -> ConverterSession:
    return request.app.state.session


def _read_form(amount: str, from_currency: str, to_currency: str, errors: List[str]) -> ConversionForm:
    from_code = from_currency.strip().upper()
    to_code = to_currency.strip().upper()
    for label, code in (("from_currency", from_code), ("to_currency", to_code)):
        if code not in CURRENCIES:
            errors.append(f"{label}: unsupported currency {code or '-'}")
    return ConversionForm(amount=amount, from_code=from_code, to_code=to_code)


def _render(
    request: Request,
    session: ConverterSession,
    form: ConversionForm,
    errors: List[str] | None = None,
    status_code: int = 200,
) -> HTMLResponse:
    settings = request.app.state.settings
    context: Dict[str, Any] = {
        "app_name": settings.app_name,
        "version": settings.version,
        "currencies": list(CURRENCY_NAMES.items()),
        "form": form,
        "errors": errors or [],
        "rate_error": session.error_message,
        "loading": session.loading,
        "can_convert": session.can_convert(form.amount),
        "last_updated": session.last_updated,
    }
    return templates.TemplateResponse(request, "index.html", context, status_code=status_code)


@router.get("/", response_class=HTMLResponse)
async def ui_home(request: Request, session: ConverterSession = Depends(get_session)):
    return _render(request, session, ConversionForm())


@router.post("/convert", response_class=HTMLResponse)
async def ui_convert(
    request: Request,
    amount: str = Form(""),
    from_currency: str = Form(...),
    to_currency: str = Form(...),
    session: ConverterSession = Depends(get_session),
):
    errors: List[str] = []
    form = _read_form(amount, from_currency, to_currency, errors)
    if errors:
        return _render(request, session, form, errors, status_code=422)
    return _render(request, session, session.submit(form))


@router.post("/swap", response_class=HTMLResponse)
async def ui_swap(
    request: Request,
    amount: str = Form(""),
    from_currency: str = Form(...),
    to_currency: str = Form(...),
    session: ConverterSession = Depends(get_session),
):
    """Exchange the selections; any previous result is dropped, not recomputed."""
    errors: List[str] = []
    form = _read_form(amount, from_currency, to_currency, errors)
    if errors:
        return _render(request, session, form, errors, status_code=422)
    return _render(request, session, form.swapped())
