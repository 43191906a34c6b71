from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness probe")
async def health(request: Request):
    session = request.app.state.session
    return {
        "status": "ok",
        "rates": session.state.status,
        "loading": session.loading,
    }
