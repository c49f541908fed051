"""Pytest fixtures for testing"""

import pytest
from decimal import Decimal
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from rate_chart_gateway.api.main import create_app
from rate_chart_gateway.infrastructure.database.models import (
    Base,
    CodeRecord,
    CodeValueRecord,
    CurrencyRecord,
    InterestIncentiveRecord,
    InterestRateSlabRecord,
)
from rate_chart_gateway.infrastructure.database.session import get_db


# Test database
TEST_DATABASE_URL = "sqlite://"
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

CHART_ID = 1
FEMALE_CODE_VALUE_ID = 21


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def seeded_db(db: Session) -> Session:
    """
    Chart 1 with three slabs:
    - 1: no incentives
    - 2: a gender incentive and an age incentive
    - 3: a client type incentive
    Chart 2 with one slab (4) that must never leak into chart 1 results.
    """
    db.add(
        CurrencyRecord(
            code="USD",
            name="US Dollar",
            internationalized_name_code="currency.USD",
            display_symbol="$",
            decimal_places=2,
            currency_multiplesof=1,
        )
    )
    db.add_all(
        [
            CodeRecord(
                id=1,
                code_name="Gender",
                is_system_defined=True,
                values=[
                    CodeValueRecord(id=20, code_value="Male", order_position=1),
                    CodeValueRecord(id=FEMALE_CODE_VALUE_ID, code_value="Female", order_position=2),
                ],
            ),
            CodeRecord(
                id=2,
                code_name="ClientType",
                is_system_defined=True,
                values=[CodeValueRecord(id=30, code_value="Salaried", order_position=1)],
            ),
            CodeRecord(id=3, code_name="ClientClassification", is_system_defined=True),
        ]
    )
    db.add_all(
        [
            InterestRateSlabRecord(
                id=1,
                interest_rate_chart_id=CHART_ID,
                description="Up to 6 months",
                period_type_enum=2,
                from_period=0,
                to_period=6,
                annual_interest_rate=Decimal("5.5"),
                currency_code="USD",
            ),
            InterestRateSlabRecord(
                id=2,
                interest_rate_chart_id=CHART_ID,
                description="6 to 12 months",
                period_type_enum=2,
                from_period=7,
                to_period=12,
                amount_range_from=Decimal("100"),
                amount_range_to=Decimal("5000"),
                annual_interest_rate=Decimal("6.25"),
                currency_code="USD",
                incentives=[
                    InterestIncentiveRecord(
                        id=10,
                        entiry_type=2,
                        attribute_name=2,
                        condition_type=2,
                        attribute_value=str(FEMALE_CODE_VALUE_ID),
                        incentive_type=3,
                        amount=Decimal("0.5"),
                    ),
                    InterestIncentiveRecord(
                        id=11,
                        entiry_type=2,
                        attribute_name=3,
                        condition_type=3,
                        # Age 21 collides with a code value id; it must not be described
                        attribute_value=str(FEMALE_CODE_VALUE_ID),
                        incentive_type=2,
                        amount=Decimal("1"),
                    ),
                ],
            ),
            InterestRateSlabRecord(
                id=3,
                interest_rate_chart_id=CHART_ID,
                description="Over a year",
                period_type_enum=3,
                from_period=1,
                to_period=None,
                annual_interest_rate=Decimal("7"),
                currency_code="USD",
                incentives=[
                    InterestIncentiveRecord(
                        id=12,
                        entiry_type=2,
                        attribute_name=4,
                        condition_type=2,
                        attribute_value="30",
                        incentive_type=3,
                        amount=Decimal("0.25"),
                    ),
                ],
            ),
            InterestRateSlabRecord(
                id=4,
                interest_rate_chart_id=2,
                description="Other chart",
                period_type_enum=0,
                from_period=0,
                to_period=30,
                annual_interest_rate=Decimal("3"),
                currency_code="USD",
            ),
        ]
    )
    db.commit()
    return db


@pytest.fixture
def client(seeded_db: Session) -> TestClient:
    """Create authenticated FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield seeded_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app, headers={"X-User-Id": "mifos"})


@pytest.fixture
def anonymous_client(client: TestClient) -> TestClient:
    """Client without the identity header"""
    return TestClient(client.app)
