import io
import subprocess
from unittest import mock

import pygame
import pytest

from slidetiles.constants import BORDER, TILE_COUNT, TILE_SIZE
from slidetiles.video import PuzzleVideo, parse_resolution, probe_resolution

RED = bytes((255, 0, 0, 255))


def _completed(stdout):
    return subprocess.CompletedProcess(args=[], returncode=0, stdout=stdout, stderr="")


def _fake_popen(frames_per_run, width, height):
    def factory(*args, **kwargs):
        proc = mock.MagicMock()
        proc.stdout = io.BytesIO(RED * width * height * frames_per_run)
        return proc

    return mock.MagicMock(side_effect=factory)


def test_parse_resolution():
    assert parse_resolution("1920,1080\n") == (1920, 1080)


def test_parse_resolution_leading_space():
    assert parse_resolution("  640, 480") == (640, 480)


@pytest.mark.parametrize("line", ["", "abc", "640x480", "0,480", "640,-1"])
def test_parse_resolution_rejects(line):
    with pytest.raises(ValueError):
        parse_resolution(line)


def test_probe_resolution_passes_file():
    with mock.patch("slidetiles.video.subprocess.run", return_value=_completed("320,240\n")) as run:
        assert probe_resolution("clip.mp4") == (320, 240)
    command = run.call_args.args[0]
    assert command[0] == "ffprobe"
    assert command[-1] == "clip.mp4"


def test_probe_resolution_empty_output():
    with mock.patch("slidetiles.video.subprocess.run", return_value=_completed("")):
        with pytest.raises(ValueError):
            probe_resolution("clip.mp4")


def test_update_without_ffprobe_stays_invalid():
    video = PuzzleVideo("clip.mp4")
    target = pygame.Surface((TILE_SIZE, TILE_SIZE))
    target.fill((0, 0, 255))
    with mock.patch("slidetiles.video.subprocess.run", side_effect=FileNotFoundError):
        video.update()
        video.draw(target, 1, 0, 0)
    assert video.is_valid is False
    assert target.get_at((10, 10)) == (0, 0, 255, 255)


def test_update_and_draw_frame():
    width, height = 10, 10
    popen = _fake_popen(2, width, height)
    with mock.patch("slidetiles.video.subprocess.run", return_value=_completed(f"{width},{height}\n")), \
            mock.patch("slidetiles.video.subprocess.Popen", popen):
        video = PuzzleVideo("clip.mp4")
        video.update()
        assert video.is_valid is True
        assert video.frame_size == width * height * 4
        target = pygame.Surface((TILE_SIZE * 2, TILE_SIZE * 2))
        target.fill((0, 0, 0))
        video.draw(target, 1, TILE_SIZE, 0)
    assert target.get_at((TILE_SIZE + 10, 10)) == (255, 0, 0, 255)
    assert target.get_at((TILE_SIZE + TILE_SIZE - BORDER + 1, 10)) == (0, 0, 0, 255)
    assert target.get_at((10, 10)) == (0, 0, 0, 255)
    assert popen.call_args.args[0][0] == "ffmpeg"


def test_update_replays_at_end():
    popen = _fake_popen(1, 10, 10)
    with mock.patch("slidetiles.video.subprocess.run", return_value=_completed("10,10\n")), \
            mock.patch("slidetiles.video.subprocess.Popen", popen):
        video = PuzzleVideo("clip.mp4")
        video.update()
        assert popen.call_count == 1
        video.update()
        assert popen.call_count == 2
        assert video.is_valid is True


def test_source_rect_square_frame():
    with mock.patch("slidetiles.video.subprocess.run", return_value=_completed("10,10\n")), \
            mock.patch("slidetiles.video.subprocess.Popen", _fake_popen(1, 10, 10)):
        video = PuzzleVideo("clip.mp4")
        video.update()
    assert video.source_rect(0) == (0.0, 0.0, 2.0, 2.0)
    for index in range(TILE_COUNT * TILE_COUNT):
        x, y, w, h = video.source_rect(index)
        assert w == h == 10 / TILE_COUNT
        assert 0 <= x and x + w <= 10
        assert 0 <= y and y + h <= 10


def test_source_rect_wide_frame_is_centred():
    with mock.patch("slidetiles.video.subprocess.run", return_value=_completed("20,10\n")), \
            mock.patch("slidetiles.video.subprocess.Popen", _fake_popen(1, 20, 10)):
        video = PuzzleVideo("clip.mp4")
        video.update()
    assert video.source_rect(0) == (5.0, 0.0, 2.0, 2.0)
    last = video.source_rect(TILE_COUNT * TILE_COUNT - 1)
    assert last[0] + last[2] == 15.0


def test_close_invalidates():
    popen = _fake_popen(3, 10, 10)
    with mock.patch("slidetiles.video.subprocess.run", return_value=_completed("10,10\n")), \
            mock.patch("slidetiles.video.subprocess.Popen", popen):
        with PuzzleVideo("clip.mp4") as video:
            video.update()
            assert video.is_valid is True
    assert video.is_valid is False