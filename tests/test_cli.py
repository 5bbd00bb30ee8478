"""CLI wiring and exit codes."""

import httpx
import pytest
from typer.testing import CliRunner

from places_brief import cli
from places_brief.core.errors import ConfigurationError, PlacesAPIError
from places_brief.models.base_model import SearchResult
from places_brief.models.places_model import PlaceEntry, PlacesResponse
from places_brief.models.summary_model import LocationSummary
from places_brief.services.places_service import PlacesService
from places_brief.services.search_service import SearchService

runner = CliRunner()


class FakeSearchService:

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def search(self, query, location_bias=None, max_results=5, summarize=True):
        self.calls.append((query, location_bias, max_results, summarize))
        if self.error:
            raise self.error
        return self.result


@pytest.fixture
def result(places_payload):
    response = PlacesResponse.model_validate(places_payload)
    entries = [PlaceEntry(place=place, context=context) for place, context in response.paired()]
    return SearchResult(query="Schools", entries=entries, response=response)


@pytest.fixture
def use_service(monkeypatch):
    def install(service, built_with=None):
        def fake_build(settings, summarize=True):
            if built_with is not None:
                built_with.append(summarize)
            return service
        monkeypatch.setattr(cli, "build_search_service", fake_build)
        return service
    return install


def test_success_exits_zero(use_service, result, summary_payload):
    summarized = result.model_copy(update={"summary": LocationSummary.model_validate(summary_payload)})
    service = use_service(FakeSearchService(summarized))

    outcome = runner.invoke(cli.app, ["search", "Schools"])

    assert outcome.exit_code == 0
    assert "Place 1: Mountain View Academy" in outcome.stdout
    assert "AI Summary" in outcome.stdout
    query, bias, max_results, summarize = service.calls[0]
    assert query == "Schools"
    assert bias.rectangle.low.latitude == 37.415
    assert bias.rectangle.high.longitude == -122.065
    assert max_results == 5
    assert summarize is True


def test_missing_summary_is_still_success(use_service, result):
    use_service(FakeSearchService(result))

    outcome = runner.invoke(cli.app, ["search", "Schools"])

    assert outcome.exit_code == 0
    assert "Place 2: Castro Street Cafe" in outcome.stdout


def test_places_failure_exits_one(use_service):
    use_service(FakeSearchService(error=PlacesAPIError("API request failed: 403 Forbidden")))

    outcome = runner.invoke(cli.app, ["search", "Schools"])

    assert outcome.exit_code == cli.EXIT_PLACES_FAILED == 1


def test_non_json_places_body_exits_one(use_service):
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>captive portal</html>"))
    use_service(SearchService(PlacesService(api_key="test-key", transport=transport), None))

    outcome = runner.invoke(cli.app, ["search", "Schools", "--no-summarize"])

    assert outcome.exit_code == cli.EXIT_PLACES_FAILED
    assert isinstance(outcome.exception, SystemExit)
    assert "Traceback" not in outcome.output


def test_unexpected_error_exits_one(use_service):
    use_service(FakeSearchService(error=KeyError("places")))

    outcome = runner.invoke(cli.app, ["search", "Schools"])

    assert outcome.exit_code == cli.EXIT_PLACES_FAILED
    assert isinstance(outcome.exception, SystemExit)


def test_configuration_error_exits_two(monkeypatch):
    def fail(settings, summarize=True):
        raise ConfigurationError("Missing required environment variable(s): GOOGLE_PLACES_API_KEY")
    monkeypatch.setattr(cli, "build_search_service", fail)

    outcome = runner.invoke(cli.app, ["search", "Schools"])

    assert outcome.exit_code == cli.EXIT_CONFIG_ERROR == 2


def test_options_are_forwarded(use_service, result):
    built_with = []
    service = use_service(FakeSearchService(result), built_with)

    outcome = runner.invoke(cli.app, [
        "search", "Parks",
        "--low-lat=40.0", "--low-lng=-74.1",
        "--high-lat=40.1", "--high-lng=-74.0",
        "--max-results", "3", "--no-summarize",
    ])

    assert outcome.exit_code == 0
    assert built_with == [False]
    query, bias, max_results, summarize = service.calls[0]
    assert query == "Parks"
    assert bias.rectangle.low.longitude == -74.1
    assert max_results == 3
    assert summarize is False


def test_inverted_rectangle_is_a_usage_error(use_service, result):
    service = use_service(FakeSearchService(result))

    outcome = runner.invoke(cli.app, ["search", "Schools", "--low-lat", "38.0", "--high-lat", "37.0"])

    assert outcome.exit_code == 2
    assert service.calls == []


def test_presets_lists_categories():
    outcome = runner.invoke(cli.app, ["presets"])

    assert outcome.exit_code == 0
    for category in ("Schools", "Restaurants", "Parks"):
        assert category in outcome.stdout
