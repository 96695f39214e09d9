"""Smoke tests for the fleet screen.

Runs the app headless over the canned fleet and checks the screen stack and
navigation state rather than rendered text.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from ecseagle.app import EcsEagleApp
from ecseagle.constants.enums import ViewState
from ecseagle.errors import GatewayError
from ecseagle.models.state.app_settings import AppSettings
from ecseagle.screens import FatalErrorScreen, FleetScreen, ServiceScreen
from ecseagle.widgets import CustomDataTable, CustomInput

pytestmark = [pytest.mark.smoke, pytest.mark.asyncio]


class TestFleetLoad:
    """Test the initial load ends on the fleet list."""

    async def test_fleet_rows(self, app, settle) -> None:
        async with app.run_test() as pilot:
            await settle(app, pilot)
            assert isinstance(app.screen, FleetScreen)
            assert app.navigation.view is ViewState.FLEET_LIST
            table = app.screen.query_one("#fleet-table", CustomDataTable)
            assert table.row_count == 2

    async def test_listing_failure_shows_fatal_screen(self, make_controller, settle) -> None:
        controller = make_controller(list_error=GatewayError("ListClusters", "expired token"))
        app = EcsEagleApp(controller, AppSettings(log_file=None))
        async with app.run_test() as pilot:
            await settle(app, pilot)
            assert isinstance(app.screen, FatalErrorScreen)
            assert "expired token" in (app.navigation.fatal_error or "")

    async def test_any_key_quits_after_fatal_error(self, make_controller, settle) -> None:
        controller = make_controller(list_error=GatewayError("ListClusters", "expired token"))
        app = EcsEagleApp(controller, AppSettings(log_file=None))
        async with app.run_test() as pilot:
            await settle(app, pilot)
            with patch.object(app, "exit") as exit_mock:
                await pilot.press("x")
                await pilot.pause()
            exit_mock.assert_called_once_with()

    async def test_empty_fleet(self, make_controller, settle) -> None:
        app = EcsEagleApp(make_controller([]), AppSettings(log_file=None))
        async with app.run_test() as pilot:
            await settle(app, pilot)
            assert isinstance(app.screen, FleetScreen)
            assert app.screen.query_one("#fleet-empty").display is True


class TestFleetFilter:
    """Test the type-to-filter flow."""

    async def test_filter_narrows_rows(self, app, settle) -> None:
        async with app.run_test() as pilot:
            await settle(app, pilot)
            await pilot.press("slash")
            await pilot.pause()
            assert app.screen.query_one("#fleet-filter", CustomInput).is_shown
            await pilot.press("a", "p", "i")
            await pilot.pause()
            assert app.navigation.fleet.filter_text == "api"
            table = app.screen.query_one("#fleet-table", CustomDataTable)
            assert table.row_count == 1

    async def test_enter_applies_then_opens(self, app, fake_controller, settle) -> None:
        async with app.run_test() as pilot:
            await settle(app, pilot)
            await pilot.press("slash", "a", "p", "i", "enter")
            await pilot.pause()
            assert app.navigation.fleet.filtering is False
            assert app.navigation.fleet.filter_text == "api"
            assert isinstance(app.screen, FleetScreen)

            await pilot.press("enter")
            await settle(app, pilot)
            assert isinstance(app.screen, ServiceScreen)
            assert fake_controller.status_calls == [
                ("arn:aws:ecs:me-central-1:111122223333:cluster/app-cluster", "api")
            ]

    async def test_escape_clears_filter(self, app, settle) -> None:
        async with app.run_test() as pilot:
            await settle(app, pilot)
            await pilot.press("slash", "w", "e", "b")
            await pilot.pause()
            await pilot.press("escape")
            await pilot.pause()
            assert app.navigation.fleet.filter_text == ""
            assert app.navigation.fleet.filtering is False
            assert app.screen.query_one("#fleet-table", CustomDataTable).row_count == 2
