"""Unit tests for CancellationToken."""

import asyncio

import pytest

from product_catalog.core.cancellation import CancellationToken, OperationCancelled


@pytest.mark.unit
class TestCancellationToken:
    """Test cooperative cancellation flag."""

    def test_new_token_is_not_cancelled(self):
        token = CancellationToken()

        assert token.is_cancelled is False
        token.raise_if_cancelled()  # no exception

    def test_cancel_sets_flag_and_raises_at_boundary(self):
        token = CancellationToken()

        token.cancel()

        assert token.is_cancelled is True
        with pytest.raises(OperationCancelled):
            token.raise_if_cancelled()

    def test_cancel_is_idempotent(self):
        token = CancellationToken()

        token.cancel()
        token.cancel()

        assert token.is_cancelled is True

    def test_none_returns_independent_tokens(self):
        first = CancellationToken.none()
        second = CancellationToken.none()

        first.cancel()

        assert second.is_cancelled is False

    @pytest.mark.asyncio
    async def test_wait_returns_once_cancelled(self):
        token = CancellationToken()

        waiter = asyncio.create_task(token.wait())
        await asyncio.sleep(0)
        assert not waiter.done()

        token.cancel()
        await asyncio.wait_for(waiter, timeout=1)

        assert waiter.done()
