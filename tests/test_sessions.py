"""Tests for session cart store and expiry"""
import asyncio
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from store.repos.cart_repo import SessionCartRepo
from store.repos.order_repo import OrderRepo
from store.services.order_service import OrderService
from store.tasks.expire import expire_carts_task, run_expiry_loop


def make_idle(repo, session_id):
    cart = repo.get_or_create(session_id)
    cart.last_active_at = datetime.now(timezone.utc) - timedelta(minutes=5)
    return cart


def test_get_or_create_returns_same_cart():
    repo = SessionCartRepo(ttl_seconds=60)

    assert repo.get("s1") is None
    cart = repo.get_or_create("s1")
    assert repo.get_or_create("s1") is cart
    assert len(repo) == 1


def test_expire_idle_removes_old_carts():
    repo = SessionCartRepo(ttl_seconds=60)
    make_idle(repo, "old")
    repo.get_or_create("fresh")

    assert repo.expire_idle() == ["old"]
    assert repo.get("old") is None
    assert repo.get("fresh") is not None


def test_access_refreshes_activity_of_empty_cart():
    repo = SessionCartRepo(ttl_seconds=60)
    cart = make_idle(repo, "s1")
    assert cart.is_empty()

    assert repo.get("s1") is cart

    assert repo.expire_idle() == []


def test_expire_with_explicit_now():
    repo = SessionCartRepo(ttl_seconds=60)
    repo.get_or_create("s1")

    assert repo.expire_idle(now=datetime.now(timezone.utc) + timedelta(minutes=2)) == ["s1"]


def test_expire_task():
    repo = SessionCartRepo(ttl_seconds=0)
    cart = repo.get_or_create("s1")
    cart.last_active_at -= timedelta(seconds=1)

    assert expire_carts_task(repo) == 1
    assert len(repo) == 0


def test_expire_task_drops_orders_of_expired_sessions(catalog):
    sessions = SessionCartRepo(ttl_seconds=60)
    orders = OrderRepo()
    svc = OrderService(sessions=sessions, orders=orders)

    placed = {}
    for sid in ("gone", "alive"):
        sessions.get_or_create(sid).add_item(catalog.find_by_id(1), 1)
        placed[sid] = svc.checkout(sid).id
    make_idle(sessions, "gone")

    assert expire_carts_task(sessions, orders) == 1
    assert len(orders) == 1
    assert orders.get_order(placed["gone"]) is None
    assert svc.get_order(placed["alive"], "alive").total_amount == Decimal("10.00")


def test_drop_sessions_ignores_unknown():
    orders = OrderRepo()

    assert orders.drop_sessions(["nobody"]) == 0


def test_expiry_loop_sweeps_idle_carts():
    repo = SessionCartRepo(ttl_seconds=60)
    make_idle(repo, "idle")
    repo.get_or_create("fresh")

    async def run():
        task = asyncio.create_task(run_expiry_loop(repo, interval=0.01))
        for _ in range(100):
            await asyncio.sleep(0.01)
            if len(repo) == 1:
                break
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        return task

    task = asyncio.run(run())

    assert task.cancelled()
    assert repo.get("idle") is None
    assert repo.get("fresh") is not None


def test_expiry_loop_survives_task_errors():
    class BrokenRepo:
        calls = 0

        def expire_idle(self):
            BrokenRepo.calls += 1
            raise RuntimeError("boom")

    async def run():
        task = asyncio.create_task(run_expiry_loop(BrokenRepo(), interval=0.01))
        await asyncio.sleep(0.1)
        assert not task.done()
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    asyncio.run(run())

    assert BrokenRepo.calls >= 2
