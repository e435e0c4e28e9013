import asyncio
from unittest.mock import Mock

import pytest

from weddingwander.weddings import live_search
from weddingwander.weddings.live_search import LiveSearch


class TestLiveSearch:
    async def test_evaluates_after_delay(self, wedding_service):
        search = LiveSearch(wedding_service, delay=0.01)

        search.update("santorini")
        results = await search.wait()

        assert [w.id for w in results] == ["wedding-006"]

    async def test_only_last_update_is_evaluated(self, wedding_service):
        seen: list[list[str]] = []

        async def on_results(results):
            seen.append([w.id for w in results])

        search = LiveSearch(wedding_service, on_results=on_results, delay=0.05)
        search.update("s")
        search.update("sa")
        search.update("kyoto")
        await search.wait()

        assert seen == [["wedding-004"]]

    async def test_close_cancels_pending_evaluation(self, wedding_service):
        seen = []

        async def on_results(results):
            seen.append(results)

        search = LiveSearch(wedding_service, on_results=on_results, delay=0.05)
        search.update("italy")
        search.close()
        await asyncio.sleep(0.1)

        assert seen == []
        assert search.closed is True

    async def test_update_after_close_raises(self, wedding_service):
        search = LiveSearch(wedding_service, delay=0.01)
        search.close()

        with pytest.raises(RuntimeError):
            search.update("x")

    async def test_empty_search_returns_whole_catalog(self, wedding_service):
        search = LiveSearch(wedding_service, delay=0.0)

        search.update("")

        assert len(await search.wait()) == 6

    async def test_failed_evaluation_is_logged_and_next_update_still_runs(
        self, wedding_service, monkeypatch
    ):
        mock_logger = Mock()
        monkeypatch.setattr(live_search, "logger", mock_logger)
        delivered: list[list[str]] = []

        async def on_results(results):
            if not delivered:
                delivered.append([])
                raise ConnectionError("client went away")
            delivered.append([w.id for w in results])

        search = LiveSearch(wedding_service, on_results=on_results, delay=0.0)
        search.update("kyoto")
        await asyncio.sleep(0.01)

        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.args[0] == "live_search_failed"
        assert "client went away" in mock_logger.warning.call_args.kwargs["error"]

        search.update("santorini")
        results = await search.wait()

        assert [w.id for w in results] == ["wedding-006"]
        assert delivered[-1] == ["wedding-006"]
