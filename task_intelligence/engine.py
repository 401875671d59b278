"""Stateless facade binding the engine functions to a clock and settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from task_intelligence.analyzer import analyze
from task_intelligence.clock import Clock, SystemClock
from task_intelligence.commands import classify
from task_intelligence.config import EngineSettings
from task_intelligence.productivity import Completion, analyze_productivity
from task_intelligence.schema import ProductivityAnalysis, TaskAnalysis, VoiceCommand
from task_intelligence.suggestions import suggest_titles


@dataclass(frozen=True)
class TaskIntelligence:
    """Reads the clock once per call and delegates to the pure functions."""

    clock: Clock = field(default_factory=SystemClock)
    settings: EngineSettings = field(default_factory=EngineSettings)

    def analyze_text(self, text: str) -> TaskAnalysis:
        return analyze(text, self.clock.now(), self.settings)

    def classify_command(self, text: str) -> VoiceCommand:
        return classify(text)

    def smart_suggestions(self) -> list[str]:
        return suggest_titles(self.clock.now(), self.settings)

    def analyze_productivity(self, completed_tasks: Iterable[Completion]) -> ProductivityAnalysis:
        return analyze_productivity(completed_tasks, self.clock.now(), self.settings)
