"""Scoped access to a camera device, a library seam for capture clients.

The HTTP service has no camera of its own and accepts the captured frame as
an upload; clients that drive a device use these helpers to hold it safely.

Only one consumer may hold the camera at a time, so every stream opened
here is stopped on all exit paths, including cancellation and errors.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Protocol

_logger = logging.getLogger(__name__)

REAR_CAMERA = "environment"


class MediaTrack(Protocol):
    """A single live track of a media stream."""

    def stop(self) -> None:
        """Stop the track and release the device."""


class MediaStream(Protocol):
    """A live stream obtained from a capture device."""

    def get_tracks(self) -> list[MediaTrack]:
        """Return every track of the stream."""

    async def grab_frame(self) -> bytes:
        """Return the current frame encoded as JPEG."""


class CameraDevice(Protocol):
    """A device that can open capture streams."""

    async def open(self, facing_mode: str) -> MediaStream:
        """Open a stream, raising when access is denied."""


def release(stream: MediaStream) -> None:
    """Stop every track of ``stream``."""
    for track in stream.get_tracks():
        try:
            track.stop()
        except Exception:
            _logger.exception("Failed to stop media track")


@asynccontextmanager
async def camera_session(
    device: CameraDevice, facing_mode: str = REAR_CAMERA
) -> AsyncIterator[MediaStream]:
    """Acquire a stream from ``device`` and release it on exit."""
    stream = await device.open(facing_mode)
    try:
        yield stream
    finally:
        release(stream)


async def capture_still(device: CameraDevice, facing_mode: str = REAR_CAMERA) -> bytes:
    """Open the camera, take one JPEG still and release the camera."""
    async with camera_session(device, facing_mode) as stream:
        return await stream.grab_frame()
