import pytest

from reviewledger.client.app_shell import AppShell, AppShellState


@pytest.mark.asyncio
async def test_load_with_placeholder_clears_loading():
    shell = AppShell()
    assert shell.state == AppShellState(user_name="Max Planck", is_loading=True, reviews=None)

    state = await shell.load()

    assert state.is_loading is False
    assert state.reviews is None


@pytest.mark.asyncio
async def test_load_stores_fetched_reviews():
    async def fetch():
        return [{"journalId": "J"}]

    state = await AppShell(fetch).load()
    assert state.reviews == [{"journalId": "J"}]
    assert state.is_loading is False


@pytest.mark.asyncio
async def test_load_failure_keeps_loading():
    async def fetch():
        raise ConnectionError("offline")

    shell = AppShell(fetch)
    state = await shell.load()
    assert state.is_loading is True
    assert state.reviews is None
