from __future__ import annotations

"""Completion ringtone playback."""

import logging
from pathlib import Path

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect


logger = logging.getLogger(__name__)


class AlarmSound(QObject):
    """Loads the ringtone once; a file that fails to load is logged and skipped."""

    def __init__(self, path: str | Path, volume: float = 1.0, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.path = Path(path)
        self._effect: QSoundEffect | None = None
        self._load(volume)

    @property
    def is_loaded(self) -> bool:
        return self._effect is not None

    def _load(self, volume: float) -> None:
        if not self.path.is_file():
            logger.error("Error: Unable to load sound - %s does not exist", self.path)
            return
        effect = QSoundEffect(self)
        effect.statusChanged.connect(self._on_status_changed)
        effect.setSource(QUrl.fromLocalFile(str(self.path)))
        effect.setLoopCount(1)
        effect.setVolume(max(0.0, min(1.0, volume)))
        self._effect = effect

    def _on_status_changed(self) -> None:
        if self._effect is not None and self._effect.status() == QSoundEffect.Status.Error:
            logger.error("Error: Unable to load sound - %s could not be decoded", self.path)
            self._effect = None

    def play(self) -> None:
        if self._effect is None:
            return
        self._effect.play()
