"""End-to-end lookup chains: user id -> user -> preference -> item id -> item details."""

import asyncio
from unittest.mock import Mock

import pytest
from hypothesis import given
from hypothesis import strategies as st
from nullpipe import monad, monad_async

from tests import catalog
from tests.strategies import stage_offsets


def run_sync(user_id):
    return (
        monad(user_id, None)
        .pipe(catalog.get_user)
        .pipe(catalog.get_user_preference)
        .pipe(catalog.get_preferred_item_id)
        .pipe(catalog.get_item_details)
    )


def run_async(user_id):
    return (
        monad_async(user_id, None)
        .pipe(catalog.get_user_async)
        .pipe(catalog.get_user_preference_async)
        .pipe(catalog.get_preferred_item_id_async)
        .pipe(catalog.get_item_details_async)
    )


class TestLookupChain:
    """The example lookup chain, sync and async."""

    @pytest.mark.parametrize(
        ('user_id', 'expected'),
        [
            ('firstUser', catalog.BIKE),
            ('secondUser', catalog.RUNNING_SHOES),
            ('thirdUser', None),
            ('fourthUser', None),
            ('missingUser', None),
        ],
    )
    async def test_expected_result(self, user_id, expected):
        assert run_sync(user_id).value == expected
        assert await run_async(user_id).value == expected

    def _spied_chain(self):
        stages = [
            Mock(side_effect=catalog.get_user),
            Mock(side_effect=catalog.get_user_preference),
            Mock(side_effect=catalog.get_preferred_item_id),
            Mock(side_effect=catalog.get_item_details),
        ]
        return stages

    @pytest.mark.parametrize(
        ('user_id', 'calls'),
        [
            ('firstUser', [1, 1, 1, 1]),
            ('thirdUser', [1, 1, 1, 0]),
            ('fourthUser', [1, 1, 0, 0]),
            ('missingUser', [1, 0, 0, 0]),
        ],
    )
    async def test_stages_after_a_miss_are_skipped(self, user_id, calls):
        """Each miss stops the chain at the stage that produced it."""
        for build in (monad, monad_async):
            stages = self._spied_chain()
            step = build(user_id, None)
            for stage in stages:
                step = step.pipe(stage)
            if build is monad_async:
                await step.value
            assert [stage.call_count for stage in stages] == calls


class TestSyncAsyncEquivalence:
    """Async chains resolve to what the equivalent sync chain returns."""

    @given(st.sampled_from(['firstUser', 'secondUser', 'thirdUser', 'fourthUser', 'nobody']))
    def test_lookup_equivalence(self, user_id):
        assert asyncio.run(self._resolve(run_async(user_id))) == run_sync(user_id).value

    @given(stage_offsets, st.integers(min_value=-10, max_value=10))
    def test_arithmetic_equivalence(self, offsets, start):
        """Stages that hit the marker -1 stop both chains at the same value."""

        def stage(value, offset):
            total = value + offset
            return -1 if total < 0 else total

        async def stage_async(value, offset):
            return stage(value, offset)

        sync_step, async_step = monad(start, -1), monad_async(start, -1)
        for offset in offsets:
            sync_step = sync_step.pipe(stage, offset)
            async_step = async_step.pipe(stage_async, offset)
        assert asyncio.run(self._resolve(async_step)) == sync_step.value

    @staticmethod
    async def _resolve(step):
        return await step.value
