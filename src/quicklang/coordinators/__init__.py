"""Coordinators - Orchestration layer connecting UI with the translation provider."""

from .language_availability_coordinator import LanguageAvailabilityCoordinator
from .translation_request_coordinator import TranslationRequestCoordinator
from .translator_controller import TranslatorController

__all__ = [
    "TranslationRequestCoordinator",
    "LanguageAvailabilityCoordinator",
    "TranslatorController",
]
