from .workout import SetFactory, ExerciseFactory, SessionFactory
from .template import BlueprintFactory, TemplateFactory
from .clock import FakeClock

__all__ = [
    "SetFactory",
    "ExerciseFactory",
    "SessionFactory",
    "BlueprintFactory",
    "TemplateFactory",
    "FakeClock",
]
