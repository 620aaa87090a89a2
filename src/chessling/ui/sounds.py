"""Sound effects player using Qt multimedia.

The tones are synthesised once per process into a temporary directory
as 16-bit mono WAV files, so the package ships no audio assets.
"""

from __future__ import annotations

import logging
import math
import struct
import tempfile
import wave
from pathlib import Path

from PyQt6.QtCore import QUrl
from PyQt6.QtMultimedia import QSoundEffect

_LOGGER = logging.getLogger(__name__)

_SAMPLE_RATE = 22050
_AMPLITUDE = 0.4

# name → sequence of (frequency Hz, duration ms); 0 Hz is a rest
_TONES: dict[str, tuple[tuple[float, int], ...]] = {
    "move": ((520.0, 70),),
    "capture": ((660.0, 60), (0.0, 20), (440.0, 90)),
    "fanfare": ((523.25, 110), (659.25, 110), (783.99, 110), (1046.5, 260)),
}


def synthesize_wav(path: Path, notes: tuple[tuple[float, int], ...]) -> None:
    """Write *notes* as a mono WAV with short fades against clicks."""
    frames = bytearray()
    for freq, duration_ms in notes:
        count = int(_SAMPLE_RATE * duration_ms / 1000)
        fade = max(1, min(count // 4, int(_SAMPLE_RATE * 0.01)))
        for i in range(count):
            if freq <= 0:
                sample = 0.0
            else:
                envelope = min(1.0, i / fade, (count - i) / fade)
                sample = _AMPLITUDE * envelope * math.sin(
                    2.0 * math.pi * freq * i / _SAMPLE_RATE
                )
            frames += struct.pack("<h", int(sample * 32767))

    with wave.open(str(path), "wb") as out:
        out.setnchannels(1)
        out.setsampwidth(2)
        out.setframerate(_SAMPLE_RATE)
        out.writeframes(bytes(frames))


class SoundPlayer:
    """Plays short game sounds (WAV via QSoundEffect).

    Each sound has a dedicated QSoundEffect loaded at startup.  A new
    event interrupts the previous one.  If the files cannot be written
    the player stays silent and logs a warning.
    """

    def __init__(self) -> None:
        self._enabled = True
        self._volume = 0.8
        self._effects: dict[str, QSoundEffect] = {}
        self._current: QSoundEffect | None = None
        self._tmpdir: tempfile.TemporaryDirectory[str] | None = None

        try:
            self._tmpdir = tempfile.TemporaryDirectory(prefix="chessling-sounds-")
            base = Path(self._tmpdir.name)
            for name, notes in _TONES.items():
                path = base / f"{name}.wav"
                synthesize_wav(path, notes)
                effect = QSoundEffect()
                effect.setSource(QUrl.fromLocalFile(str(path)))
                effect.setVolume(self._volume)
                self._effects[name] = effect
        except OSError as exc:
            _LOGGER.warning("Sound effects unavailable: %s", exc)

    # ── Public API ────────────────────────────────────────────────────────

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled
        if not enabled and self._current is not None:
            self._current.stop()

    def set_volume(self, volume: int) -> None:
        """Set volume in range 0–100."""
        self._volume = max(0, min(100, volume)) / 100.0
        for effect in self._effects.values():
            effect.setVolume(self._volume)

    def play_move(self, *, capture: bool) -> None:
        self._play("capture" if capture else "move")

    def play_fanfare(self) -> None:
        """Level-up and game-over jingle."""
        self._play("fanfare")

    # ── Internal helpers ──────────────────────────────────────────────────

    def _play(self, name: str) -> None:
        if not self._enabled:
            return
        effect = self._effects.get(name)
        if effect is None:
            return
        if self._current is not None and self._current.isPlaying():
            self._current.stop()
        self._current = effect
        effect.play()
