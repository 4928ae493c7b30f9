# Synthetic telemetry: shared progress timeline + per-module data generators.

from goalboard.synthesis.synthesizer import DataSynthesizer, SynthesisResult
from goalboard.synthesis.timeline import ProgressTimeline

__all__ = ["DataSynthesizer", "ProgressTimeline", "SynthesisResult"]
