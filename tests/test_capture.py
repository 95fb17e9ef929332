"""Tests for scoped camera access."""

import asyncio
from dataclasses import dataclass, field

import pytest

from cookify.services.capture import camera_session, capture_still


@dataclass
class FakeTrack:
    stopped: bool = False

    def stop(self) -> None:
        self.stopped = True


@dataclass
class FakeStream:
    tracks: list[FakeTrack] = field(default_factory=lambda: [FakeTrack(), FakeTrack()])
    frame_error: Exception | None = None

    def get_tracks(self) -> list[FakeTrack]:
        return self.tracks

    async def grab_frame(self) -> bytes:
        if self.frame_error is not None:
            raise self.frame_error
        return b"\xff\xd8\xffframe"


@dataclass
class FakeCamera:
    stream: FakeStream = field(default_factory=FakeStream)
    denied: bool = False
    facing_modes: list[str] = field(default_factory=list)

    async def open(self, facing_mode: str) -> FakeStream:
        if self.denied:
            raise PermissionError("camera permission denied")
        self.facing_modes.append(facing_mode)
        return self.stream


def test_capture_still_releases_camera() -> None:
    camera = FakeCamera()

    frame = asyncio.run(capture_still(camera))

    assert frame.startswith(b"\xff\xd8\xff")
    assert camera.facing_modes == ["environment"]
    assert all(track.stopped for track in camera.stream.tracks)


def test_tracks_stop_when_consumer_goes_away_without_closing() -> None:
    camera = FakeCamera()

    async def consumer() -> None:
        async with camera_session(camera):
            await asyncio.sleep(10)

    async def unmount() -> None:
        task = asyncio.create_task(consumer())
        await asyncio.sleep(0.01)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(unmount())

    assert all(track.stopped for track in camera.stream.tracks)


def test_tracks_stop_on_capture_error() -> None:
    camera = FakeCamera(stream=FakeStream(frame_error=RuntimeError("no frame")))

    with pytest.raises(RuntimeError):
        asyncio.run(capture_still(camera))

    assert all(track.stopped for track in camera.stream.tracks)


def test_permission_denied_propagates() -> None:
    with pytest.raises(PermissionError):
        asyncio.run(capture_still(FakeCamera(denied=True)))
