import asyncio

from asgiref.sync import async_to_sync
from django.apps import apps

from cookiepedia.realtime.hub import RealtimeHub
from cookiepedia.realtime.lifespan import lifespan_app

from .fakes import FakeConnection


def test_lifespan_starts_and_stops_the_hub(monkeypatch):
    hub = RealtimeHub(sweep_interval=60, enforce_participants=False)
    monkeypatch.setattr(apps.get_app_config("realtime"), "hub", hub)

    async def scenario():
        inbox: asyncio.Queue = asyncio.Queue()
        sent = []
        started = asyncio.Event()

        async def send(message):
            sent.append(message["type"])
            started.set()

        app = asyncio.ensure_future(
            lifespan_app({"type": "lifespan"}, inbox.get, send),
        )
        await inbox.put({"type": "lifespan.startup"})
        await asyncio.wait_for(started.wait(), timeout=1)
        assert hub.running
        hub.connect(1, FakeConnection())

        await inbox.put({"type": "lifespan.shutdown"})
        await asyncio.wait_for(app, timeout=1)
        assert sent == ["lifespan.startup.complete", "lifespan.shutdown.complete"]
        assert not hub.running
        assert len(hub.registry) == 0

    async_to_sync(scenario)()
