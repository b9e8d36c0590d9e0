import logging

from fastapi import FastAPI

from domly.asset.router import router as asset_router
from domly.calendar.router import router as calendar_router
from domly.condominium.router import router as condominium_router
from domly.dashboard.router import router as dashboard_router
from domly.maintenance.router import router as maintenance_router
from domly.user.router import router as user_router

logging.basicConfig(level=logging.INFO)

app = FastAPI(title="Domly")
app.include_router(user_router)
app.include_router(condominium_router)
app.include_router(asset_router)
app.include_router(maintenance_router)
app.include_router(calendar_router)
app.include_router(dashboard_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
