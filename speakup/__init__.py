from .analyzer import analyze_transcript
from .config import AnalysisConfig, get_settings, reload_settings
from .domain import (
    AnalysisResult,
    FillerInstance,
    PauseInterval,
    RawWord,
    SubscoreSet,
    TimedWord,
)
from .streaming import StreamingFeedbackMonitor
