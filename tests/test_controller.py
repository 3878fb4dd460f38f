import asyncio
import pytest
from literaki.config import EngineSettings
from literaki.errors import TooManyWildcardsError
from literaki.search.cancellation import CANCELLED, Cancelled
from literaki.search.controller import SearchController
from literaki.words.index import build_index

def make_controller(source, **settings):
    delivered = []
    controller = SearchController(
        source,
        on_result=lambda query, result: delivered.append((query, result)),
        settings=EngineSettings(**settings),
    )
    return controller, delivered

async def test_result_is_delivered():
    controller, delivered = make_controller(build_index(["kot", "tok", "kota"]))
    result = await controller.submit("otk")
    assert result == {"kot", "tok"}
    assert delivered == [("otk", {"kot", "tok"})]

async def test_newer_search_cancels_older_at_checkpoint():
    words = frozenset({"kota", "ma"})
    controller, delivered = make_controller(words, permutation_checkpoint=1)

    first = asyncio.create_task(controller.submit("kota"))
    await asyncio.sleep(0)  # first search is now parked at a checkpoint
    second = await controller.submit("am")

    assert await first is CANCELLED
    assert second == {"ma"}
    assert delivered == [("am", {"ma"})]

async def test_stale_result_dropped_after_last_checkpoint():
    # the first search passes its final checkpoint before the second starts
    words = frozenset({"ab", "ba"})
    controller, delivered = make_controller(words, permutation_checkpoint=2)

    first = asyncio.create_task(controller.submit("ab"))
    await asyncio.sleep(0)
    second = await controller.submit("ba")

    assert isinstance(await first, Cancelled)
    assert second == {"ab", "ba"}
    assert delivered == [("ba", {"ab", "ba"})]

async def test_cancel_without_new_search():
    controller, delivered = make_controller(frozenset({"kota"}), permutation_checkpoint=1)
    task = asyncio.create_task(controller.submit("kota"))
    await asyncio.sleep(0)
    controller.cancel()
    assert await task is CANCELLED
    assert delivered == []

async def test_too_many_wildcards_propagates():
    controller, delivered = make_controller(build_index(["kot"]))
    with pytest.raises(TooManyWildcardsError):
        await controller.submit("???")
    assert delivered == []

def test_tokens_follow_controller_version():
    controller, _ = make_controller(build_index(["kot"]))
    old = controller.new_token()
    assert not old.cancelled
    new = controller.new_token()
    assert old.cancelled
    assert not new.cancelled
    new.cancel()
    assert new.cancelled
