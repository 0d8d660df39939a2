"""Unit tests for the Customer and Reservation domain models."""

from datetime import date, datetime

import pytest

from models.customer import Customer
from models.errors import ValidationError
from models.reservation import Reservation


class TestCustomer:
    """Tests for Customer field logic."""

    def test_full_name(self, ann: Customer) -> None:
        assert ann.full_name() == "Ann Lee"
        assert str(ann) == "Ann Lee"

    def test_validate_accepts_both_names(self, ann: Customer) -> None:
        ann.validate()

    @pytest.mark.parametrize(
        "first, last",
        [("", "Lee"), ("Ann", ""), (None, "Lee"), ("Ann", None), ("", "")],
    )
    def test_validate_rejects_missing_name(self, first, last) -> None:
        customer = Customer(first_name=first, last_name=last)

        with pytest.raises(ValidationError, match="missing name"):
            customer.validate()

    def test_is_persisted(self, ann: Customer) -> None:
        assert not ann.is_persisted()
        ann.id = 7
        assert ann.is_persisted()

    def test_equality_ignores_reservation_count(self) -> None:
        a = Customer(id=1, first_name="Ann", last_name="Lee", reservation_count=3)
        b = Customer(id=1, first_name="Ann", last_name="Lee")
        assert a == b


class TestReservationGuests:
    """Tests for the party size guard."""

    @pytest.mark.parametrize("bad", [0, -1])
    def test_set_num_guests_rejects_below_one(self, reservation: Reservation, bad: int) -> None:
        with pytest.raises(ValidationError):
            reservation.set_num_guests(bad)

        assert reservation.num_guests == 4

    def test_set_num_guests_updates_value(self, reservation: Reservation) -> None:
        reservation.set_num_guests(6)
        assert reservation.num_guests == 6

    def test_direct_assignment_is_validated(self, reservation: Reservation) -> None:
        with pytest.raises(ValidationError):
            reservation.num_guests = 0

        assert reservation.num_guests == 4

    def test_constructor_is_validated(self) -> None:
        with pytest.raises(ValidationError):
            Reservation(customer_id=1, num_guests=0, start_at=datetime(2024, 1, 1))

    @pytest.mark.parametrize("bad", ["4", 2.5, True, None])
    def test_rejects_non_integer(self, reservation: Reservation, bad) -> None:
        with pytest.raises(ValidationError):
            reservation.set_num_guests(bad)


class TestReservationStartAt:
    """Tests for start time parsing and formatting."""

    def test_datetime_is_valid(self, reservation: Reservation) -> None:
        assert reservation.validate_start_at() == datetime(2024, 4, 5, 19, 30)

    def test_string_is_parsed(self) -> None:
        r = Reservation(customer_id=1, num_guests=2, start_at="2024-04-05 19:30")
        assert r.validate_start_at() == datetime(2024, 4, 5, 19, 30)

    def test_date_is_promoted(self) -> None:
        r = Reservation(customer_id=1, num_guests=2, start_at=date(2024, 4, 5))
        assert r.validate_start_at() == datetime(2024, 4, 5)

    @pytest.mark.parametrize("bad", ["not a date", "", "   ", None, 12345])
    def test_invalid_start_at(self, bad) -> None:
        r = Reservation(customer_id=1, num_guests=2, start_at=bad)

        with pytest.raises(ValidationError, match="Invalid start date"):
            r.validate_start_at()

    def test_formatted_start_at(self, reservation: Reservation) -> None:
        assert reservation.formatted_start_at() == "April 5th 2024, 7:30 pm"

    def test_str_uses_formatted_start_at(self, reservation: Reservation) -> None:
        assert str(reservation) == "4 guests | April 5th 2024, 7:30 pm"

    def test_str_falls_back_to_raw_start_at(self) -> None:
        r = Reservation(customer_id=1, num_guests=2, start_at="sometime soon")
        assert str(r) == "2 guests | sometime soon"

    @pytest.mark.parametrize(
        "start, expected",
        [
            (datetime(2024, 1, 1, 0, 5), "January 1st 2024, 12:05 am"),
            (datetime(2024, 3, 22, 12, 0), "March 22nd 2024, 12:00 pm"),
            (datetime(2024, 5, 13, 9, 45), "May 13th 2024, 9:45 am"),
            (datetime(2024, 6, 23, 18, 15), "June 23rd 2024, 6:15 pm"),
        ],
    )
    def test_formatted_start_at_ordinals(self, start: datetime, expected: str) -> None:
        r = Reservation(customer_id=1, num_guests=2, start_at=start)
        assert r.formatted_start_at() == expected
