from fastapi import APIRouter, Request

router = APIRouter(tags=["System"])


@router.get("/")
async def root() -> dict[str, str]:
    return {"message": "Forecast service is running!"}


@router.get("/health")
async def health(request: Request) -> dict[str, str]:
    repository = request.app.state.forecast_repository
    return {"status": "ok", "upstream": repository.base_url}
