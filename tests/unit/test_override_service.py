import pytest

from booking_api.core.exceptions import InvalidInputError
from booking_api.services.overrides import OverrideService
from booking_api.stores.overrides import OverrideStore

TUESDAY = "2025-10-28"


@pytest.fixture
def override_service():
    return OverrideService(OverrideStore())


@pytest.mark.unit
class TestSetOverrides:
    """Test merging of per-slot overrides."""

    def test_set_overrides(self, override_service):
        merged = override_service.set_overrides(
            TUESDAY, {"08:00 AM - 09:00 AM": False}
        )

        assert merged == {"08:00 AM - 09:00 AM": False}
        assert override_service.overrides.is_disabled(TUESDAY, "08:00 AM - 09:00 AM")

    def test_patch_merges_with_existing_entries(self, override_service):
        override_service.set_overrides(
            TUESDAY, {"08:00 AM - 09:00 AM": False, "09:00 AM - 10:00 AM": False}
        )

        merged = override_service.set_overrides(
            TUESDAY, {"09:00 AM - 10:00 AM": True, "10:00 AM - 11:00 AM": False}
        )

        assert merged == {
            "08:00 AM - 09:00 AM": False,
            "09:00 AM - 10:00 AM": True,
            "10:00 AM - 11:00 AM": False,
        }

    def test_dates_are_independent(self, override_service):
        override_service.set_overrides(TUESDAY, {"08:00 AM - 09:00 AM": False})

        assert not override_service.overrides.is_disabled(
            "2025-10-29", "08:00 AM - 09:00 AM"
        )

    @pytest.mark.parametrize(
        "date_key,slots",
        [
            (None, {"08:00 AM - 09:00 AM": False}),
            ("", {"08:00 AM - 09:00 AM": False}),
            (TUESDAY, None),
            (TUESDAY, {}),
            (TUESDAY, ["08:00 AM - 09:00 AM"]),
        ],
    )
    def test_missing_date_or_slots(self, override_service, date_key, slots):
        with pytest.raises(InvalidInputError) as exc_info:
            override_service.set_overrides(date_key, slots)

        assert exc_info.value.message == "Date and slots object are required."

    def test_malformed_date(self, override_service):
        with pytest.raises(InvalidInputError):
            override_service.set_overrides("2025-13-01", {"08:00 AM - 09:00 AM": False})

    def test_non_boolean_value(self, override_service):
        with pytest.raises(InvalidInputError):
            override_service.set_overrides(TUESDAY, {"08:00 AM - 09:00 AM": "no"})

        assert override_service.list_overrides() == {}


@pytest.mark.unit
class TestListOverrides:
    def test_list_overrides(self, override_service):
        override_service.set_overrides(TUESDAY, {"08:00 AM - 09:00 AM": False})
        override_service.set_overrides("2025-10-29", {"10:00 AM - 11:00 AM": True})

        assert override_service.list_overrides() == {
            TUESDAY: {"08:00 AM - 09:00 AM": False},
            "2025-10-29": {"10:00 AM - 11:00 AM": True},
        }

    def test_listing_is_a_snapshot(self, override_service):
        override_service.set_overrides(TUESDAY, {"08:00 AM - 09:00 AM": False})
        listing = override_service.list_overrides()
        listing[TUESDAY]["08:00 AM - 09:00 AM"] = True

        assert override_service.overrides.is_disabled(TUESDAY, "08:00 AM - 09:00 AM")
