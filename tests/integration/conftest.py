from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import date

import httpx
import pytest
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncSession

from domly.asset.models import Asset, AssetCondition
from domly.asset.router import router as asset_router
from domly.base.dependencies import get_session
from domly.calendar.router import router as calendar_router
from domly.condominium.models import Condominium
from domly.condominium.router import router as condominium_router
from domly.dashboard.router import router as dashboard_router
from domly.maintenance.router import router as maintenance_router
from domly.user.models import User
from domly.user.router import router as user_router


@pytest.fixture
def app(db_session: AsyncSession) -> FastAPI:
    test_app = FastAPI()
    for router in (
        user_router,
        condominium_router,
        asset_router,
        maintenance_router,
        calendar_router,
        dashboard_router,
    ):
        test_app.include_router(router)

    async def override_session() -> AsyncSession:  # type: ignore[misc]
        yield db_session  # type: ignore[misc]

    test_app.dependency_overrides[get_session] = override_session
    return test_app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)  # type: ignore[arg-type]
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def user(db_session: AsyncSession) -> User:
    u = User(name="Test", email="test@example.com")
    db_session.add(u)
    await db_session.flush()
    return u


@pytest.fixture
async def other_user(db_session: AsyncSession) -> User:
    u = User(name="Other", email="other@example.com")
    db_session.add(u)
    await db_session.flush()
    return u


@pytest.fixture
def auth_header() -> dict[str, str]:
    return {"X-User": "Test:test@example.com"}


@pytest.fixture
def other_auth_header() -> dict[str, str]:
    return {"X-User": "Other:other@example.com"}


MakeCondominium = Callable[..., Awaitable[Condominium]]
MakeAsset = Callable[..., Awaitable[Asset]]


@pytest.fixture
def make_condominium(db_session: AsyncSession, user: User) -> MakeCondominium:
    async def _make(name: str = "Edifício Aurora", owner: User = user) -> Condominium:
        condominium = Condominium(
            user_id=owner.id,
            name=name,
            city="Lisboa",
            address="Rua das Flores 12",
            postal_code="1200-195",
            tax_number=501234567,
            iban="PT50000201231234567890154",
            bank="CGD",
            unit_count=12,
            floor_count=4,
            construction_year=1998,
            has_elevator=True,
            email="admin@aurora.pt",
            phone="+351 210 000 000",
        )
        db_session.add(condominium)
        await db_session.flush()
        return condominium

    return _make


@pytest.fixture
def make_asset(db_session: AsyncSession) -> MakeAsset:
    async def _make(condominium: Condominium, name: str = "Elevator A") -> Asset:
        asset = Asset(
            condominium_id=condominium.id,
            name=name,
            category="Lift",
            brand="Otis",
            model="Gen2",
            serial_number=123456,
            installed_on=date(2015, 3, 1),
            condition=AssetCondition.GOOD,
            description="Main lift",
            value=25000.0,
        )
        db_session.add(asset)
        await db_session.flush()
        return asset

    return _make


@pytest.fixture
async def condominium(make_condominium: MakeCondominium) -> Condominium:
    return await make_condominium()


@pytest.fixture
async def asset(make_asset: MakeAsset, condominium: Condominium) -> Asset:
    return await make_asset(condominium)
