import pytest

from fieldbook.core.exceptions import ConflictException, NotFoundException, ValidationException
from fieldbook.services.field_service import FieldService


@pytest.fixture
def service(db) -> FieldService:
    return FieldService(db)


class TestFieldService:
    def test_create_and_list(self, service):
        first = service.create_field("Lapangan A", 100, "Jakarta")
        second = service.create_field("Lapangan B", 150, "Bandung")

        fields = service.list_fields()

        assert [f.id for f in fields] == [first.id, second.id]

    @pytest.mark.parametrize(
        "name,price,location,message",
        [
            ("", 100, "Jakarta", "Field name is required"),
            ("   ", 100, "Jakarta", "Field name is required"),
            ("A", 0, "Jakarta", "Price per hour must be greater than 0"),
            ("A", -5, "Jakarta", "Price per hour must be greater than 0"),
            ("A", 100, "", "Location is required"),
        ],
    )
    def test_create_validation(self, service, name, price, location, message):
        with pytest.raises(ValidationException) as exc_info:
            service.create_field(name, price, location)

        assert exc_info.value.message == message

    def test_get_price_and_existence(self, service, make_field):
        field = make_field(name="Court", price_per_hour=120, location="Depok")

        assert service.get_price_and_existence(field.id) == (120, "Court", "Depok")

    def test_get_price_and_existence_for_update(self, service, make_field):
        field = make_field(name="Court", price_per_hour=120, location="Depok")

        with service.transaction():
            locked = service.get_price_and_existence(field.id, for_update=True)

        assert locked == (120, "Court", "Depok")
        with pytest.raises(NotFoundException, match="Field not found"):
            service.get_price_and_existence(42, for_update=True)

    def test_get_missing_field(self, service):
        with pytest.raises(NotFoundException, match="Field not found"):
            service.get_price_and_existence(42)

    def test_update_replaces_attributes(self, service, make_field):
        field = make_field()

        updated = service.update_field(field.id, "Renamed", 250, "Bogor")

        assert (updated.name, updated.price_per_hour, updated.location) == ("Renamed", 250, "Bogor")

    def test_update_missing_field(self, service):
        with pytest.raises(NotFoundException):
            service.update_field(42, "Name", 100, "Somewhere")

    def test_update_validates_before_lookup(self, service):
        with pytest.raises(ValidationException):
            service.update_field(42, "Name", 0, "Somewhere")

    def test_delete(self, service, make_field):
        field = make_field()

        service.delete_field(field.id)

        with pytest.raises(NotFoundException):
            service.get_field(field.id)

    def test_delete_missing_field(self, service):
        with pytest.raises(NotFoundException):
            service.delete_field(42)

    def test_delete_field_with_bookings_conflicts(self, service, make_field, make_booking):
        field = make_field()
        make_booking(field)

        with pytest.raises(ConflictException, match="Field has existing bookings"):
            service.delete_field(field.id)

        assert service.get_field(field.id).id == field.id

