"""Tests for the calendar conversion REST API."""

from fastapi import status

from multicalendar.calendar_systems import CalendarType


class TestConvertEndpoint:
    """Test GET /api/v1/convert."""

    def test_missing_date(self, client):
        response = client.get("/api/v1/convert")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Missing date parameter"}

    def test_empty_date(self, client):
        response = client.get("/api/v1/convert", params={"date": ""})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Missing date parameter"}

    def test_invalid_date(self, client):
        response = client.get("/api/v1/convert", params={"date": "not-a-date"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Invalid date format"}

    def test_invalid_calendar_type(self, client):
        response = client.get("/api/v1/convert", params={"date": "2025-01-01", "type": "bogus"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Invalid calendar type"}

    def test_date_checked_before_type(self, client):
        response = client.get("/api/v1/convert", params={"date": "nope", "type": "bogus"})

        assert response.json() == {"error": "Invalid date format"}

    def test_single_type(self, client):
        response = client.get(
            "/api/v1/convert", params={"date": "2025-12-25", "type": "gregorian"}
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["day"] == 25
        assert data["month"] == "December"
        assert data["year"] == 2025
        assert data["holiday"] == "Christmas Day"
        assert "meta" not in response.json()

    def test_all_types(self, client):
        response = client.get("/api/v1/convert", params={"date": "2025-06-15"})

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["meta"] == {
            "sourceDate": "2025-06-15T00:00:00.000Z",
            "apiVersion": "v1",
        }
        assert len(body["data"]) == len(CalendarType)
        assert [item["type"] for item in body["data"]] == [t.value for t in CalendarType]

    def test_offset_date_uses_utc(self, client):
        response = client.get(
            "/api/v1/convert", params={"date": "2025-01-01T02:00:00+05:00"}
        )

        body = response.json()
        assert body["meta"]["sourceDate"] == "2024-12-31T21:00:00.000Z"
        assert body["data"][0]["day"] == 31

    def test_locale(self, client):
        response = client.get(
            "/api/v1/convert",
            params={"date": "2025-12-25", "type": "gregorian", "locale": "id"},
        )

        data = response.json()["data"]
        assert data["month"] == "Desember"
        assert data["holiday"] == "Christmas Day"

    def test_partial_date_resolves_to_first_day(self, client):
        response = client.get(
            "/api/v1/convert", params={"date": "June 2025", "type": "gregorian"}
        )

        data = response.json()["data"]
        assert (data["day"], data["month"], data["year"]) == (1, "June", 2025)

    def test_year_only_resolves_to_new_year(self, client):
        response = client.get("/api/v1/convert", params={"date": "2025"})

        assert response.json()["meta"]["sourceDate"] == "2025-01-01T00:00:00.000Z"

    def test_first_century_date(self, client):
        """Calendars without a year for the date still answer with a partial result."""
        response = client.get("/api/v1/convert", params={"date": "0001-02-01"})

        assert response.status_code == status.HTTP_200_OK
        saka = {item["type"]: item for item in response.json()["data"]}["saka"]
        assert saka["month"] == "Unavailable"
        assert saka["day"] == 0

    def test_cache_header(self, client):
        response = client.get("/api/v1/convert", params={"date": "2025-06-15"})

        assert response.headers["cache-control"] == "public, max-age=86400"

    def test_balinese_anchor(self, client):
        response = client.get(
            "/api/v1/convert", params={"date": "2024-02-28", "type": "balinese"}
        )

        data = response.json()["data"]
        assert data["cycle"].startswith("Buda Kliwon")
        assert data["month"] == "Dungulan"
        assert data["nativeData"]["kind"] == "cycle"


class TestCompanionEndpoints:
    """Test the read-only calendar endpoints."""

    def test_calendars(self, client):
        response = client.get("/api/v1/calendars")

        data = response.json()["data"]
        assert len(data) == len(CalendarType)
        assert data[0] == {
            "type": "gregorian",
            "name": "Gregorian",
            "description": "International standard",
        }

    def test_boundaries(self, client):
        response = client.get(
            "/api/v1/boundaries", params={"date": "2024-02-28", "type": "balinese"}
        )

        assert response.json() == {"data": {"start": "2024-02-25", "end": "2024-03-02"}}

    def test_boundaries_default_gregorian(self, client):
        response = client.get("/api/v1/boundaries", params={"date": "2025-02-14"})

        assert response.json() == {"data": {"start": "2025-02-01", "end": "2025-02-28"}}

    def test_boundaries_invalid_type(self, client):
        response = client.get(
            "/api/v1/boundaries", params={"date": "2025-02-14", "type": "bogus"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_holidays(self, client):
        response = client.get("/api/v1/holidays", params={"type": "hijri"})

        data = response.json()["data"]
        assert {"month": "Shawwal", "day": 1, "name": "Eid al-Fitr"} in data

    def test_holidays_requires_type(self, client):
        response = client.get("/api/v1/holidays")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Invalid calendar type"}

    def test_month_grid(self, client):
        response = client.get(
            "/api/v1/month-grid",
            params={"date": "2025-02-14", "types": "gregorian,balinese"},
        )

        data = response.json()["data"]
        assert data["primary"] == "gregorian"
        assert len(data["weeks"]) == 5
        assert set(data["weeks"][2][5]["conversions"]) == {"gregorian", "balinese"}
        assert data["weeks"][2][5]["date"] == "2025-02-14"
        assert data["weeks"][2][5]["holidays"] == ["Valentine's Day"]

    def test_month_grid_missing_date(self, client):
        response = client.get("/api/v1/month-grid")

        assert response.json() == {"error": "Missing date parameter"}


def test_health_live(client):
    response = client.get("/health/live")

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["status"] == "healthy"
    assert body["calendars"] == 12
