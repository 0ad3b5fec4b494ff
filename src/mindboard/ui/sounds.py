"""Answer feedback tones played with Qt multimedia.

The two tones are synthesized once into WAV files under the temp directory,
then pre-loaded into ``QSoundEffect`` objects for zero-latency playback.
"""

from __future__ import annotations

import logging
import math
import tempfile
import wave
from array import array
from dataclasses import dataclass
from pathlib import Path

from PyQt6.QtCore import QUrl
from PyQt6.QtMultimedia import QSoundEffect

_LOGGER = logging.getLogger(__name__)

_SAMPLE_RATE = 22050
_MASTER_GAIN = 0.15


@dataclass(frozen=True, slots=True)
class Tone:
    """A short pitch sweep with an attack/decay envelope."""

    waveform: str  # "sine" | "triangle"
    start_hz: float
    end_hz: float
    sweep_seconds: float
    peak: float
    attack_seconds: float
    duration_seconds: float

    def samples(self, sample_rate: int = _SAMPLE_RATE) -> array:
        """16-bit mono PCM samples."""
        out = array("h")
        phase = 0.0
        total = int(self.duration_seconds * sample_rate)
        for i in range(total):
            t = i / sample_rate
            ratio = min(t / self.sweep_seconds, 1.0)
            freq = self.start_hz * (self.end_hz / self.start_hz) ** ratio
            phase = (phase + freq / sample_rate) % 1.0
            if self.waveform == "triangle":
                value = 4.0 * abs(phase - 0.5) - 1.0
            else:
                value = math.sin(2.0 * math.pi * phase)
            out.append(int(value * self._envelope(t) * _MASTER_GAIN * 32767))
        return out

    def _envelope(self, t: float) -> float:
        if t < self.attack_seconds:
            return self.peak * t / self.attack_seconds
        decay = self.duration_seconds - self.attack_seconds
        progress = (t - self.attack_seconds) / decay
        return self.peak * (0.01 / self.peak) ** progress


CORRECT_TONE = Tone("sine", 880.0, 1320.0, 0.1, 0.4, 0.02, 0.2)
INCORRECT_TONE = Tone("triangle", 110.0, 70.0, 0.15, 0.5, 0.05, 0.3)


def write_wav(path: Path, tone: Tone) -> Path:
    """Render *tone* to a mono 16-bit WAV file at *path*."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with wave.open(str(path), "wb") as wav:
        wav.setnchannels(1)
        wav.setsampwidth(2)
        wav.setframerate(_SAMPLE_RATE)
        wav.writeframes(tone.samples().tobytes())
    return path


class SoundPlayer:
    """Plays the correct / incorrect answer tones.

    A new tone always interrupts the previous one.
    """

    _TONES: dict[str, Tone] = {
        "correct": CORRECT_TONE,
        "incorrect": INCORRECT_TONE,
    }

    def __init__(self, cache_dir: Path | None = None) -> None:
        self._enabled = True
        self._volume = 0.8
        self._effects: dict[str, QSoundEffect] = {}
        self._current: QSoundEffect | None = None

        sound_dir = cache_dir or Path(tempfile.gettempdir()) / "mindboard-sounds"
        for name, tone in self._TONES.items():
            path = sound_dir / f"{name}.wav"
            try:
                if not path.is_file():
                    write_wav(path, tone)
            except OSError as exc:
                _LOGGER.warning("Could not write sound %s: %s", path, exc)
                continue
            effect = QSoundEffect()
            effect.setSource(QUrl.fromLocalFile(str(path)))
            effect.setVolume(self._volume)
            self._effects[name] = effect

    # ── Public API ────────────────────────────────────────────────────────

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    @property
    def is_enabled(self) -> bool:
        return self._enabled

    def set_volume(self, volume: int) -> None:
        """Set volume in range 0–100."""
        self._volume = max(0, min(100, volume)) / 100.0
        for effect in self._effects.values():
            effect.setVolume(self._volume)

    def play_correct(self) -> None:
        self._play("correct")

    def play_incorrect(self) -> None:
        self._play("incorrect")

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
