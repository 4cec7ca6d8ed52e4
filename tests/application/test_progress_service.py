import pytest

from pkgview.application.services.progress import CancellationToken, LoggingProgressService


def test_token_trips_once_cancelled():
    token = CancellationToken()
    assert not token.is_cancellation_requested
    token.cancel()
    assert token.is_cancellation_requested


@pytest.mark.asyncio
async def test_cancel_only_applies_to_cancellable_scope():
    progress = LoggingProgressService()
    await progress.start_loading("Packages")
    progress.cancel()
    assert not progress.get_cancellation_token().is_cancellation_requested

    await progress.start_loading("Packages", cancellable=True)
    progress.cancel()
    assert progress.get_cancellation_token().is_cancellation_requested


@pytest.mark.asyncio
async def test_each_scope_gets_a_fresh_token():
    progress = LoggingProgressService()
    await progress.start_loading("Packages", cancellable=True)
    first = progress.get_cancellation_token()
    progress.cancel()
    await progress.stop_loading()

    await progress.start_loading("Packages", cancellable=True)

    assert progress.get_cancellation_token() is not first
    assert not progress.get_cancellation_token().is_cancellation_requested
    assert progress.is_loading


def test_report_clamps_fraction():
    progress = LoggingProgressService()
    progress.report(1.5)
    assert progress.fraction == 1.0
    progress.report(-1)
    assert progress.fraction == 0.0
