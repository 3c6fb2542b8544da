import asyncio
import pytest
from catalog_studio.core.catalog_store import CatalogStore
from catalog_studio.utils.errors import CatalogFetchError
from catalog_studio.utils.typing import Category, Item

class FakeSource:
    def __init__(self, fail_times: int = 0):
        self.calls = []
        self.fail_times = fail_times
        self.gate = asyncio.Event()
        self.gate.set()

    async def fetch(self, category):
        self.calls.append(category)
        await self.gate.wait()
        if self.fail_times:
            self.fail_times -= 1
            raise CatalogFetchError(category.value, "HTTP error! status: 500")
        return [Item(name=f"{category.value}-1"), Item(name=f"{category.value}-2")]

@pytest.mark.asyncio
async def test_fetches_once_and_caches():
    source = FakeSource()
    store = CatalogStore(source.fetch)
    first = await store.ensure_loaded(Category.PRODUCTS)
    second = await store.ensure_loaded(Category.PRODUCTS)
    assert first == second
    assert [i.name for i in first] == ["products-1", "products-2"]
    assert source.calls == [Category.PRODUCTS]
    assert store.cached(Category.PRODUCTS) == first
    assert store.cached(Category.PLUGINS) is None

@pytest.mark.asyncio
async def test_concurrent_calls_join_pending_fetch():
    source = FakeSource()
    source.gate.clear()
    store = CatalogStore(source.fetch)

    t1 = asyncio.ensure_future(store.ensure_loaded(Category.PLUGINS))
    t2 = asyncio.ensure_future(store.ensure_loaded(Category.PLUGINS))
    await asyncio.sleep(0)
    assert store.is_loading(Category.PLUGINS)
    source.gate.set()
    a, b = await asyncio.gather(t1, t2)

    assert a == b
    assert source.calls == [Category.PLUGINS]
    assert not store.is_loading(Category.PLUGINS)

@pytest.mark.asyncio
async def test_categories_fetch_independently():
    source = FakeSource()
    store = CatalogStore(source.fetch)
    await asyncio.gather(
        store.ensure_loaded(Category.PRODUCTS),
        store.ensure_loaded(Category.PLUGINS),
    )
    assert sorted(c.value for c in source.calls) == ["plugins", "products"]

@pytest.mark.asyncio
async def test_failure_leaves_cache_empty_and_retries():
    source = FakeSource(fail_times=1)
    store = CatalogStore(source.fetch)

    with pytest.raises(CatalogFetchError):
        await store.ensure_loaded(Category.PRODUCTS)
    assert store.cached(Category.PRODUCTS) is None
    assert not store.is_loading(Category.PRODUCTS)

    items = await store.ensure_loaded(Category.PRODUCTS)
    assert len(items) == 2
    assert source.calls == [Category.PRODUCTS, Category.PRODUCTS]

@pytest.mark.asyncio
async def test_unexpected_errors_are_wrapped():
    async def boom(category):
        raise RuntimeError("connection reset")

    store = CatalogStore(boom)
    with pytest.raises(CatalogFetchError) as exc:
        await store.ensure_loaded(Category.PLUGINS)
    assert exc.value.category == "plugins"
    assert "connection reset" in str(exc.value)
