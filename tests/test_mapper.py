"""Tests for derived fields and entity <-> schema mapping."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from app.models import Address, CreditHistory, Customer, Employment
from app.schemas.customer import AddressCreate, CustomerCreate
from app.services import mapper


class TestFullName:
    def test_joins_with_single_space(self) -> None:
        assert mapper.full_name("Ann", "Lee") == "Ann Lee"


class TestCalculateAge:
    def test_birthday_already_passed(self) -> None:
        assert mapper.calculate_age(date(1990, 3, 1), today=date(2023, 6, 1)) == 33

    def test_birthday_is_today(self) -> None:
        assert mapper.calculate_age(date(1990, 6, 1), today=date(2023, 6, 1)) == 33

    def test_birthday_still_ahead(self) -> None:
        assert mapper.calculate_age(date(1990, 6, 2), today=date(2023, 6, 1)) == 32

    def test_compares_day_of_year(self) -> None:
        # Feb 29 (day 60) vs Mar 1 of a non-leap year (day 60): not ahead
        assert mapper.calculate_age(date(2000, 2, 29), today=date(2023, 3, 1)) == 23
        # Mar 1 of a leap year (day 61) vs Mar 1 of a non-leap year (day 60)
        assert mapper.calculate_age(date(2000, 3, 1), today=date(2023, 3, 1)) == 22

    def test_defaults_to_today(self) -> None:
        born = date(date.today().year - 30, 1, 1)
        assert mapper.calculate_age(born) == 30


class TestFullAddress:
    def test_with_unit(self) -> None:
        result = mapper.full_address("456 Oak Avenue", "Apt 2B", "Los Angeles", "CA", "90001")
        assert result == "456 Oak Avenue Apt 2B, Los Angeles, CA 90001"

    def test_without_unit(self) -> None:
        result = mapper.full_address("123 Main Street", None, "New York", "NY", "10001")
        assert result == "123 Main Street, New York, NY 10001"

    def test_empty_unit_is_treated_as_missing(self) -> None:
        result = mapper.full_address("123 Main Street", "", "New York", "NY", "10001")
        assert result == "123 Main Street, New York, NY 10001"


class TestYearsEmployed:
    TODAY = date(2024, 6, 1)

    def test_current_counts_to_today(self) -> None:
        assert mapper.years_employed(date(2020, 9, 1), None, True, today=self.TODAY) == 4

    def test_current_ignores_end_date(self) -> None:
        assert mapper.years_employed(date(2020, 1, 1), date(2021, 1, 1), True, today=self.TODAY) == 4

    def test_past_uses_end_year(self) -> None:
        assert mapper.years_employed(date(2015, 5, 1), date(2018, 2, 1), False, today=self.TODAY) == 3

    def test_past_without_end_date_counts_to_today(self) -> None:
        assert mapper.years_employed(date(2015, 5, 1), None, False, today=self.TODAY) == 9


class TestCreditRating:
    @pytest.mark.parametrize(
        "score,rating",
        [
            (850, "Excellent"),
            (800, "Excellent"),
            (799, "Very Good"),
            (740, "Very Good"),
            (739, "Good"),
            (670, "Good"),
            (669, "Fair"),
            (580, "Fair"),
            (579, "Poor"),
            (300, "Poor"),
        ],
    )
    def test_band_boundaries(self, score: int, rating: str) -> None:
        assert mapper.credit_rating(score) == rating


class TestDebtToIncomeRatio:
    def test_zero_available_credit(self) -> None:
        assert mapper.debt_to_income_ratio(Decimal("25000"), Decimal("0")) == Decimal("0")

    def test_missing_values(self) -> None:
        assert mapper.debt_to_income_ratio(None, None) == Decimal("0")

    def test_percentage(self) -> None:
        assert mapper.debt_to_income_ratio(Decimal("25000"), Decimal("50000")) == Decimal("50")

    def test_rounds_to_two_places(self) -> None:
        assert mapper.debt_to_income_ratio(Decimal("1"), Decimal("3")) == Decimal("33.33")

    def test_over_one_hundred_percent(self) -> None:
        assert mapper.debt_to_income_ratio(Decimal("35000"), Decimal("10000")) == Decimal("350")


def _customer(**overrides) -> Customer:
    fields = dict(
        id=uuid4(),
        first_name="Ann",
        last_name="Lee",
        email="ann@x.com",
        phone="+1-555-0000",
        ssn="111-22-3333",
        date_of_birth=date(1990, 1, 1),
        is_active=True,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    fields.update(overrides)
    return Customer(**fields)


class TestCustomerResponse:
    def test_without_children(self) -> None:
        response = mapper.to_customer_response(_customer(), today=date(2024, 6, 1))

        assert response.full_name == "Ann Lee"
        assert response.age == 34
        assert response.address is None
        assert response.employments == []
        assert response.credit_history is None
        assert response.updated_at is None

    def test_with_children(self) -> None:
        customer = _customer()
        customer.address = Address(
            id=uuid4(), street="1 Elm St", unit="4", city="Austin", state="TX",
            zip_code="73301", country="USA", address_type="Mailing",
        )
        customer.employments = [
            Employment(
                id=uuid4(), employer_name="Acme", employment_type="PartTime",
                annual_income=Decimal("40000.50"), start_date=date(2021, 2, 1), is_current=True,
            )
        ]
        customer.credit_history = CreditHistory(
            id=uuid4(), credit_score=700, report_date=datetime(2024, 5, 1, tzinfo=timezone.utc),
            credit_bureau="Equifax", total_debt=Decimal("1000"), available_credit=Decimal("4000"),
            number_of_accounts=3, late_payments=0, bankruptcies=0, foreclosures=0,
        )

        response = mapper.to_customer_response(customer, today=date(2024, 6, 1))

        assert response.address.full_address == "1 Elm St 4, Austin, TX 73301"
        assert response.address.address_type == "Mailing"
        assert response.employments[0].employment_type == "PartTime"
        assert response.employments[0].years_employed == 3
        assert response.employments[0].annual_income == 40000.5
        assert response.credit_history.credit_rating == "Good"
        assert response.credit_history.debt_to_income_ratio == 25.0

    def test_serializes_camel_case(self) -> None:
        body = mapper.to_customer_response(_customer()).model_dump(by_alias=True)

        assert "firstName" in body
        assert "fullName" in body
        assert "creditHistory" in body
        assert "ssn" not in body


class TestCustomerEntity:
    def test_without_address(self) -> None:
        data = CustomerCreate(
            first_name="Ann", last_name="Lee", email="ann@x.com",
            phone="+1-555-0000", ssn="111-22-3333", date_of_birth=date(1990, 1, 1),
        )

        customer = mapper.to_customer_entity(data)

        assert customer.first_name == "Ann"
        assert customer.ssn == "111-22-3333"
        assert customer.is_active is True
        assert customer.address is None

    def test_address_defaults(self) -> None:
        data = CustomerCreate(
            first_name="Ann", last_name="Lee", email="ann@x.com",
            phone="+1-555-0000", ssn="111-22-3333", date_of_birth=date(1990, 1, 1),
            address=AddressCreate(street="1 Elm St", city="Austin", state="TX", zip_code="73301"),
        )
        before = data.model_dump()

        customer = mapper.to_customer_entity(data)

        assert customer.address.country == "USA"
        assert customer.address.address_type == "Primary"
        assert customer.address.unit is None
        assert data.model_dump() == before


def _column_state(entity) -> dict:
    return {column.key: getattr(entity, column.key) for column in entity.__table__.columns}


class TestMappingLeavesInputAlone:
    def test_customer_response(self) -> None:
        customer = _customer(created_at=datetime(2024, 1, 1, 9, 30), updated_at=datetime(2024, 2, 1, 8, 0))
        customer.address = Address(
            id=uuid4(), street="1 Elm St", unit="", city="Austin", state="TX",
            zip_code="73301", country="USA", address_type="Primary",
        )
        customer.employments = [
            Employment(
                id=uuid4(), employer_name="Acme", employment_type="Contract",
                annual_income=Decimal("1000"), start_date=date(2019, 1, 1),
                end_date=date(2020, 1, 1), is_current=False,
            )
        ]
        customer.credit_history = CreditHistory(
            id=uuid4(), credit_score=590, report_date=datetime(2024, 5, 1, 12, 0),
            credit_bureau="Experian", total_debt=None, available_credit=Decimal("0"),
        )
        entities = [customer, customer.address, customer.employments[0], customer.credit_history]
        before = [_column_state(entity) for entity in entities]

        mapper.to_customer_response(customer, today=date(2024, 6, 1))

        assert [_column_state(entity) for entity in entities] == before
        assert customer.created_at.tzinfo is None
        assert len(customer.employments) == 1

    def test_customer_entity(self) -> None:
        data = CustomerCreate(
            first_name="Ann", last_name="Lee", email="ann@x.com",
            phone="+1-555-0000", ssn="111-22-3333", date_of_birth=date(1990, 1, 1),
            address=AddressCreate(street="1 Elm St", city="Austin", state="TX", zip_code="73301"),
        )
        before = data.model_dump()

        first = mapper.to_customer_entity(data)
        second = mapper.to_customer_entity(data)

        assert data.model_dump() == before
        assert data.address.country == "USA"
        assert first is not second
        assert first.address is not second.address


class TestUtcTimestamps:
    def test_naive_is_tagged_as_utc(self) -> None:
        result = mapper.as_utc(datetime(2024, 1, 1, 9, 30))

        assert result == datetime(2024, 1, 1, 9, 30, tzinfo=timezone.utc)
        assert result.tzinfo is timezone.utc

    def test_aware_is_converted(self) -> None:
        local = datetime(2024, 1, 1, 9, 30, tzinfo=timezone(timedelta(hours=-5)))

        assert mapper.as_utc(local) == datetime(2024, 1, 1, 14, 30, tzinfo=timezone.utc)
        assert mapper.as_utc(local).utcoffset() == timedelta(0)

    def test_none(self) -> None:
        assert mapper.as_utc(None) is None

    def test_response_timestamps_agree_with_envelope(self) -> None:
        customer = _customer(created_at=datetime(2024, 1, 1, 9, 30), updated_at=datetime(2024, 2, 1, 8, 0))
        customer.credit_history = CreditHistory(
            id=uuid4(), credit_score=700, report_date=datetime(2024, 5, 1, 12, 0),
            credit_bureau="Experian", total_debt=Decimal("0"), available_credit=Decimal("0"),
        )

        body = mapper.to_customer_response(customer).model_dump(mode="json", by_alias=True)

        assert body["createdAt"] == "2024-01-01T09:30:00Z"
        assert body["updatedAt"] == "2024-02-01T08:00:00Z"
        assert body["creditHistory"]["reportDate"] == "2024-05-01T12:00:00Z"
