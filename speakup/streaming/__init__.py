"""Live feedback while a recording is in progress."""

from .haptics import CueKind, CuePlayer, HapticCueGenerator, NullCuePlayer
from .monitor import (
    MonitorStatus,
    PartialTranscript,
    StreamingFeedbackMonitor,
    StreamingSnapshot,
    StreamingState,
)
from .stop_policy import GracefulStopPolicy

__all__ = [
    "CueKind",
    "CuePlayer",
    "GracefulStopPolicy",
    "HapticCueGenerator",
    "MonitorStatus",
    "NullCuePlayer",
    "PartialTranscript",
    "StreamingFeedbackMonitor",
    "StreamingSnapshot",
    "StreamingState",
]
