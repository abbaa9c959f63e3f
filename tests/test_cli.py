"""Tests for the command-line front end."""

import json

import pytest
from navitia_fakes import FakeResponse, FakeSession

from idfm_transit.adapters.navitia_api import NavitiaTransitRepository
from idfm_transit.cli import build_parser, main, run_command

NEARBY_PATH = "/coord/2.352200;48.856600/places_nearby"


def _station_places() -> FakeResponse:
    return FakeResponse(
        {
            "places": [
                {"id": "stop_area:IDFM:71264", "name": "Châtelet", "embedded_type": "stop_area"},
                {"id": "address:1", "name": "Rue du Châtelet", "embedded_type": "address"},
            ]
        }
    )


class TestBuildParser:
    """Tests for argument parsing."""

    def test_nearby_coordinates_are_floats(self) -> None:
        """Given nearby coordinates, when parsing, then latitude and longitude are floats."""
        args = build_parser().parse_args(["nearby", "48.8566", "2.3522", "--json"])

        assert args.command == "nearby"
        assert args.latitude == pytest.approx(48.8566)
        assert args.longitude == pytest.approx(2.3522)
        assert args.json is True

    def test_lines_category_is_restricted(self) -> None:
        """Given an unknown line category, when parsing, then argparse exits."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["lines", "--category", "BUS"])


class TestRunCommand:
    """Tests for command execution against a fake Navitia service."""

    @pytest.mark.asyncio
    async def test_search_prints_stop_areas(
        self,
        fake_session: FakeSession,
        repository: NavitiaTransitRepository,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Given a place search, when running search, then only stop areas are printed."""
        fake_session.routes["/places"] = _station_places()
        args = build_parser().parse_args(["search", "Châtelet"])

        exit_code = await run_command(args, repository)

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Found 1 station(s)" in out
        assert "ID: stop_area:IDFM:71264" in out
        assert "Rue du Châtelet" not in out

    @pytest.mark.asyncio
    async def test_search_json_output(
        self,
        fake_session: FakeSession,
        repository: NavitiaTransitRepository,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Given --json, when running search, then stations are printed as a JSON array."""
        fake_session.routes["/places"] = _station_places()
        args = build_parser().parse_args(["search", "Châtelet", "--json"])

        await run_command(args, repository)

        data = json.loads(capsys.readouterr().out)
        assert data == [{"id": "stop_area:IDFM:71264", "name": "Châtelet"}]

    @pytest.mark.asyncio
    async def test_journeys_with_ids_skip_resolution(
        self,
        fake_session: FakeSession,
        repository: NavitiaTransitRepository,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Given two stop area ids, when running journeys, then no place search is made."""
        fake_session.routes["/journeys"] = FakeResponse({"journeys": []})
        args = build_parser().parse_args(
            ["journeys", "stop_area:IDFM:71264", "stop_area:IDFM:71517"]
        )

        exit_code = await run_command(args, repository)

        assert exit_code == 0
        assert fake_session.paths() == ["/journeys"]
        assert "No journeys found" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_journeys_unresolved_origin_exits_with_error(
        self,
        fake_session: FakeSession,
        repository: NavitiaTransitRepository,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Given a name with no match, when running journeys, then the exit code is 1."""
        fake_session.routes["/places"] = FakeResponse({"places": []})
        args = build_parser().parse_args(["journeys", "Nowhere", "stop_area:IDFM:71517"])

        exit_code = await run_command(args, repository)

        assert exit_code == 1
        assert "Could not resolve" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_lines_failure_prints_nothing_and_succeeds(
        self,
        repository: NavitiaTransitRepository,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Given the line catalog fails, when running lines, then the catalog is empty."""
        args = build_parser().parse_args(["lines"])

        exit_code = await run_command(args, repository)

        captured = capsys.readouterr()
        assert exit_code == 0
        assert "No lines available" in captured.err
        assert captured.out == ""

    @pytest.mark.asyncio
    async def test_stations_prints_catalog_line_header(
        self,
        fake_session: FakeSession,
        repository: NavitiaTransitRepository,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Given a metro line id, when running stations, then the line heads its station list."""
        line = {
            "id": "line:1",
            "code": "1",
            "name": "La Défense - Vincennes",
            "commercial_mode": {"id": "commercial_mode:Metro", "name": "Metro"},
        }
        fake_session.routes["/lines"] = FakeResponse({"lines": [line]})
        fake_session.routes["/lines/line:1/stop_points"] = FakeResponse(
            {"stop_points": [{"id": "stop_point:1", "name": "Châtelet"}]}
        )
        args = build_parser().parse_args(["stations", "line:1"])

        exit_code = await run_command(args, repository)

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Metro 1 - La Défense - Vincennes" in out
        assert "ID: stop_point:1" in out

    @pytest.mark.asyncio
    async def test_nearby_nearest_prints_one_station(
        self,
        fake_session: FakeSession,
        repository: NavitiaTransitRepository,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Given --nearest, when running nearby, then only the closest station is printed."""
        fake_session.routes[NEARBY_PATH] = FakeResponse(
            {
                "places_nearby": [
                    {"stop_area": {"id": "stop_area:IDFM:71264", "name": "Châtelet"}},
                    {"stop_area": {"id": "stop_area:IDFM:73794", "name": "Les Halles"}},
                ]
            }
        )
        args = build_parser().parse_args(["nearby", "48.8566", "2.3522", "--nearest", "--json"])

        exit_code = await run_command(args, repository)

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert data == [{"id": "stop_area:IDFM:71264", "name": "Châtelet"}]

    @pytest.mark.asyncio
    async def test_nearby_upstream_error_exits_with_error(
        self,
        fake_session: FakeSession,
        repository: NavitiaTransitRepository,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Given the nearby lookup fails with HTTP 500, then the error is reported and code is 1."""
        fake_session.routes[NEARBY_PATH] = FakeResponse({}, status=500, reason="Server Error")
        args = build_parser().parse_args(["nearby", "48.8566", "2.3522"])

        exit_code = await run_command(args, repository)

        err = capsys.readouterr().err
        assert exit_code == 1
        assert "HTTP 500: Server Error" in err

    @pytest.mark.asyncio
    async def test_nearby_empty_result_is_not_an_error(
        self,
        fake_session: FakeSession,
        repository: NavitiaTransitRepository,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Given no nearby places, when running nearby, then a message is shown with code 0."""
        fake_session.routes[NEARBY_PATH] = FakeResponse({"places_nearby": []})
        args = build_parser().parse_args(["nearby", "48.8566", "2.3522"])

        exit_code = await run_command(args, repository)

        assert exit_code == 0
        assert "No stations found nearby" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_main_without_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    """Given no subcommand, when running main, then help is printed and the exit code is 1."""
    exit_code = await main([])

    assert exit_code == 1
    assert "usage:" in capsys.readouterr().out
