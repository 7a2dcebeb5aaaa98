"""Tests for WeatherSession state transitions and refresh ordering."""

import asyncio
from datetime import datetime

import httpx
import pytest
import respx

from metro_weather.models.config import Config, Settings
from metro_weather.models.display import Locale, ThemeMode
from metro_weather.models.weather import RawForecastPayload
from metro_weather.services.localization import strings_for
from metro_weather.services.session import WeatherSession
from metro_weather.services.theme import palette_for
from metro_weather.services.weather_service import FetchError


class FakeSource:
    """Forecast source returning canned results, optionally held behind a gate."""

    def __init__(self):
        self.results: dict[str, RawForecastPayload | Exception] = {}
        self.gates: dict[str, asyncio.Event] = {}
        self.calls: list[str] = []

    async def fetch_forecast(self, location):
        self.calls.append(location.id)
        gate = self.gates.get(location.id)
        if gate is not None:
            await gate.wait()
        result = self.results[location.id]
        if isinstance(result, Exception):
            raise result
        return result


class MovableClock:
    """Clock that stays put until moved."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def source(make_payload_data):
    """Create a fake source with payloads for two districts."""
    source = FakeSource()
    source.results["shibuya"] = RawForecastPayload.model_validate(
        make_payload_data(current_temp=10.0)
    )
    source.results["shinjuku"] = RawForecastPayload.model_validate(
        make_payload_data(current_temp=25.0)
    )
    return source


@pytest.fixture
def clock(monday_morning):
    """Create a clock set to Monday morning."""
    return MovableClock(monday_morning)


@pytest.fixture
def session(source, clock):
    """Create an English session backed by the fake source."""
    config = Config(settings=Settings(locale="en"))
    return WeatherSession(config=config, source=source, clock=clock)


class TestInitialState:
    """Tests for a fresh session."""

    def test_starts_without_view(self, session):
        """Test a new session has no view and is not loading."""
        assert session.view is None
        assert session.loading is False
        assert session.error is None
        assert session.location.id == "shibuya"
        assert session.generation == 0

    def test_strings_and_palette_follow_settings(self, session):
        """Test strings and palette come from the settings."""
        assert session.strings == strings_for(Locale.EN)
        assert session.palette == palette_for(ThemeMode.LIGHT)


class TestRefresh:
    """Tests for refresh()."""

    def test_successful_refresh(self, session):
        """Test a successful refresh applies a complete view."""
        assert asyncio.run(session.refresh()) is True
        assert session.loading is False
        assert session.view.location_id == "shibuya"
        assert session.view.current.temperature_c == 10
        assert len(session.view.hourly) == 6
        assert len(session.view.daily) == 7
        assert session.view.daily[0].day_label == "Today"

    def test_failed_refresh_keeps_previous_view(self, session, source):
        """Test a failed refresh keeps the last good view."""
        asyncio.run(session.refresh())
        previous = session.view

        source.results["shibuya"] = FetchError("HTTP 500")
        assert asyncio.run(session.refresh()) is False

        assert session.view is previous
        assert session.loading is False
        assert session.error == strings_for(Locale.EN).error_message

    def test_failed_first_refresh_leaves_no_view(self, session, source):
        """Test a failed first refresh leaves the session without a view."""
        source.results["shibuya"] = FetchError("Connection error")
        assert asyncio.run(session.refresh()) is False
        assert session.view is None
        assert session.error is not None

    def test_error_cleared_by_next_refresh(self, session, source, make_payload_data):
        """Test a successful refresh clears the previous error."""
        source.results["shibuya"] = FetchError("Request timeout")
        asyncio.run(session.refresh())

        source.results["shibuya"] = RawForecastPayload.model_validate(make_payload_data())
        asyncio.run(session.refresh())
        assert session.error is None

    def test_generation_increments(self, session):
        """Test each refresh bumps the generation."""
        asyncio.run(session.refresh())
        asyncio.run(session.refresh())
        assert session.generation == 2

    @respx.mock
    def test_negative_code_from_api_ends_loading(self, make_payload_data, clock):
        """Test a response with a negative weather code fails without leaving loading set."""
        body = make_payload_data(daily_codes=[0, -1, 0, 0, 0, 0, 0])
        respx.get(host="api.open-meteo.com", path="/v1/forecast").mock(
            return_value=httpx.Response(200, json=body)
        )
        session = WeatherSession(clock=clock)

        assert asyncio.run(session.refresh()) is False
        assert session.loading is False
        assert session.view is None
        assert session.error == session.strings.error_message


class TestStaleResponses:
    """Tests that only the latest refresh is applied."""

    def test_stale_response_is_discarded(self, session, source):
        """Test a slow response for the previous location is dropped."""

        async def scenario():
            source.gates["shibuya"] = asyncio.Event()
            first = asyncio.create_task(session.refresh())
            await asyncio.sleep(0)  # first refresh is now waiting on its fetch

            session.select_next_location()
            second = await session.refresh()

            source.gates["shibuya"].set()
            return await first, second

        first_applied, second_applied = asyncio.run(scenario())

        assert first_applied is False
        assert second_applied is True
        assert session.view.location_id == "shinjuku"
        assert session.view.current.temperature_c == 25
        assert source.calls == ["shibuya", "shinjuku"]

    def test_stale_failure_does_not_set_error(self, session, source):
        """Test a slow failure for the previous location sets no error."""

        async def scenario():
            source.results["shibuya"] = FetchError("Request timeout")
            source.gates["shibuya"] = asyncio.Event()
            first = asyncio.create_task(session.refresh())
            await asyncio.sleep(0)

            session.select_next_location()
            await session.refresh()

            source.gates["shibuya"].set()
            return await first

        assert asyncio.run(scenario()) is False
        assert session.error is None
        assert session.view.location_id == "shinjuku"


class TestToggles:
    """Tests for locale, theme and location transitions."""

    def test_toggle_locale_rederives_view(self, session):
        """Test switching locale builds a new view and leaves the old one alone."""
        asyncio.run(session.refresh())
        english = session.view

        assert session.toggle_locale() == Locale.JA
        assert session.view is not english
        assert session.view.daily[0].day_label == "今日"
        assert english.daily[0].day_label == "Today"

    def test_toggle_locale_keeps_reference_instant(self, session, clock, tokyo):
        """Test switching locale after midnight keeps the fetched hours and days."""
        asyncio.run(session.refresh())
        before = session.view

        clock.now = datetime(2024, 1, 16, 1, 0, tzinfo=tokyo)
        session.toggle_locale()
        session.toggle_locale()

        after = session.view
        assert after.reference == before.reference
        assert [s.hour_label for s in after.hourly] == [
            "10:00", "11:00", "12:00", "13:00", "14:00", "15:00"
        ]
        assert [d.day_label for d in after.daily] == [
            "Today", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
        ]
        assert after == before

    def test_toggle_locale_without_view(self, session):
        """Test switching locale before any data only changes the strings."""
        session.toggle_locale()
        assert session.view is None
        assert session.strings == strings_for(Locale.JA)

    def test_toggle_theme_twice_restores_palette(self, session):
        """Test two theme toggles restore the original palette."""
        original = session.palette
        assert session.toggle_theme() == ThemeMode.DARK
        assert session.palette != original
        session.toggle_theme()
        assert session.palette == original

    def test_select_next_location_wraps(self, session):
        """Test six location changes visit every district and wrap."""
        ids = [session.select_next_location().id for _ in range(6)]
        assert ids == ["shinjuku", "ginza", "harajuku", "akihabara", "roppongi", "shibuya"]
