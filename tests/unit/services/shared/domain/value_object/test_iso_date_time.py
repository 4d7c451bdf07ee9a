import pytest

from services.shared.domain import IsoDateTime


class TestIsoDateTime:
    def test_from_string_accepts_z_suffix(self):
        dt = IsoDateTime.from_string("2024-06-01T14:30:00Z")
        assert str(dt) == "2024-06-01T14:30:00+00:00"

    def test_invalid_string_raises_error(self):
        with pytest.raises(ValueError, match="Invalid ISO 8601 datetime"):
            IsoDateTime.from_string("tomorrow")

    def test_ordering(self):
        earlier = IsoDateTime.from_string("2024-06-01T10:00:00+00:00")
        later = IsoDateTime.from_string("2024-06-01T11:00:00+00:00")
        assert earlier.is_before(later)
        assert later.is_after(earlier)
