"""Video frames decoded by ffmpeg and cut into tile-sized pieces."""

from __future__ import annotations

import logging
import re
import subprocess

import pygame

from .constants import BORDER, TILE_COUNT, TILE_SIZE
from .utils import xy

logger = logging.getLogger(__name__)

_RESOLUTION = re.compile(r"\s*([+-]?\d+),\s*([+-]?\d+)")


def parse_resolution(line: str) -> tuple[int, int]:
    """Parse ffprobe's ``width,height`` output into a positive resolution."""
    match = _RESOLUTION.match(line)
    if match is None:
        raise ValueError("Failed to ffprobe video resolution")
    width, height = int(match.group(1)), int(match.group(2))
    if width <= 0 or height <= 0:
        raise ValueError("invalid video resolution")
    return width, height


def probe_resolution(file: str) -> tuple[int, int]:
    """Ask ffprobe for the resolution of the first video stream of ``file``."""
    result = subprocess.run(
        [
            "ffprobe",
            "-v", "error",
            "-select_streams", "v:0",
            "-show_entries", "stream=width,height",
            "-of", "csv=p=0",
            file,
        ],
        capture_output=True,
        text=True,
    )
    lines = result.stdout.splitlines()
    if not lines:
        raise ValueError("invalid video resolution")
    return parse_resolution(lines[0])


class PuzzleVideo:
    """A looping video whose frames are drawn as puzzle tiles."""

    def __init__(self, file: str = "mouse.mp4") -> None:
        self.file = file
        self.frame_width = 0
        self.frame_height = 0
        self.frame_size = 0
        self._process: subprocess.Popen | None = None
        self._frame = bytearray()
        self._surface: pygame.Surface | None = None
        self._valid = False

    def __enter__(self) -> PuzzleVideo:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def is_valid(self) -> bool:
        return self._valid

    def _decode_command(self) -> list[str]:
        return ["ffmpeg", "-re", "-i", self.file,
                "-f", "rawvideo", "-pix_fmt", "rgba", "-"]

    def _start_decoder(self) -> subprocess.Popen:
        return subprocess.Popen(
            self._decode_command(),
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
        )

    def _stop_decoder(self) -> None:
        if self._process is None:
            return
        if self._process.stdout is not None:
            self._process.stdout.close()
        self._process.wait()
        self._process = None

    def _init(self) -> None:
        try:
            self.frame_width, self.frame_height = probe_resolution(self.file)
        except OSError:
            logger.error("Error opening ffmpeg for information. Did you install ffmpeg?")
            return
        except ValueError as err:
            logger.error("Error: %s", err)
            return
        self.frame_size = self.frame_width * self.frame_height * 4

        try:
            self._process = self._start_decoder()
        except OSError:
            logger.error("Error opening ffmpeg for frames. Did you install ffmpeg?")
            return

        self._frame = bytearray(self.frame_size)
        self._refresh_surface()
        logger.info("frame_size %d", self.frame_size)
        self._valid = True

    def _refresh_surface(self) -> None:
        self._surface = pygame.image.frombuffer(
            bytes(self._frame), (self.frame_width, self.frame_height), "RGBA"
        )

    def _read_frame(self) -> bytes:
        assert self._process is not None and self._process.stdout is not None
        return self._process.stdout.read(self.frame_size) or b""

    def update(self) -> None:
        """Read the next frame, restarting the video when it ends."""
        if not self._valid:
            self._init()
        if not self._valid:
            logger.error("Cannot update: Video not initialized")
            return

        data = self._read_frame()
        if len(data) < self.frame_size:
            logger.info("Get the end of the video, Replay")
            self._stop_decoder()
            try:
                self._process = self._start_decoder()
            except OSError:
                logger.error("Error while reading a frame")
                self._valid = False
                return
            data = self._read_frame()

        self._frame[: len(data)] = data
        self._refresh_surface()

    def source_rect(self, index: int) -> tuple[float, float, float, float]:
        """Return the (x, y, width, height) area of the frame shown for ``index``."""
        size = float(min(self.frame_width, self.frame_height))
        grid_size = size / TILE_COUNT
        offset_x = (self.frame_width - size) / 2
        offset_y = (self.frame_height - size) / 2
        texture_x, texture_y = xy(index)
        return (
            texture_x * grid_size + offset_x,
            texture_y * grid_size + offset_y,
            grid_size,
            grid_size,
        )

    def draw(self, surface: pygame.Surface, index: int, x: int, y: int) -> None:
        """Draw the piece of the current frame for ``index`` at ``(x, y)``."""
        if not self._valid or self._surface is None:
            logger.error("Cannot draw: Video not initialized")
            return
        left, top, width, height = self.source_rect(index)
        area = pygame.Rect(int(left), int(top), max(int(width), 1), max(int(height), 1))
        area = area.clip(self._surface.get_rect())
        if area.width == 0 or area.height == 0:
            return
        piece = self._surface.subsurface(area)
        side = TILE_SIZE - BORDER
        surface.blit(pygame.transform.scale(piece, (side, side)), (x, y))

    def close(self) -> None:
        """Stop the decoder and release the current frame."""
        if self._process is not None:
            self._process.terminate()
            self._stop_decoder()
        self._surface = None
        self._valid = False