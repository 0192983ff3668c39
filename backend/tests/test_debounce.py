"""Tests for the single-slot debouncer."""

import asyncio

from bloodlink.utils.debounce import Debouncer


class TestDebouncer:
    def test_collapses_bursts(self) -> None:
        calls = []

        async def scenario():
            debouncer = Debouncer(0.02, lambda: calls.append("fired"))
            for _ in range(5):
                debouncer.trigger()
            await debouncer.wait()

        asyncio.run(scenario())
        assert calls == ["fired"]

    def test_separate_quiet_periods_fire_twice(self) -> None:
        calls = []

        async def scenario():
            debouncer = Debouncer(0.01, lambda: calls.append(len(calls)))
            debouncer.trigger()
            await debouncer.wait()
            debouncer.trigger()
            await debouncer.wait()

        asyncio.run(scenario())
        assert calls == [0, 1]

    def test_cancel_drops_pending_call(self) -> None:
        calls = []

        async def scenario():
            debouncer = Debouncer(0.01, lambda: calls.append(1))
            debouncer.trigger()
            debouncer.cancel()
            await asyncio.sleep(0.05)
            return debouncer.pending

        assert asyncio.run(scenario()) is False
        assert calls == []

    def test_run_now_invokes_immediately(self) -> None:
        calls = []

        async def scenario():
            debouncer = Debouncer(10, lambda: calls.append("now"))
            debouncer.trigger()
            await debouncer.run_now()
            return debouncer.pending

        assert asyncio.run(scenario()) is False
        assert calls == ["now"]

    def test_awaits_async_callbacks(self) -> None:
        calls = []

        async def callback():
            await asyncio.sleep(0)
            calls.append("async")

        async def scenario():
            debouncer = Debouncer(0.01, callback)
            debouncer.trigger()
            await debouncer.wait()

        asyncio.run(scenario())
        assert calls == ["async"]

    def test_pending_while_async_callback_runs(self) -> None:
        seen = []

        async def scenario():
            debouncer = None

            async def callback():
                seen.append(debouncer.pending)
                await asyncio.sleep(0.01)
                seen.append(debouncer.pending)

            debouncer = Debouncer(0.01, callback)
            debouncer.trigger()
            await debouncer.wait()
            return debouncer.pending

        assert asyncio.run(scenario()) is False
        assert seen == [True, True]

    def test_wait_without_pending_returns(self) -> None:
        asyncio.run(Debouncer(0.01, lambda: None).wait())
