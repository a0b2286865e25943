"""
Validation core for hyprpreflight.

This package contains the pieces that turn individual requirement checks
into one installation decision:

Value types:
    - ValidationStatus, Severity, ValidationOutcome, RequirementName
    - UserGuidance: Remediation text attached to a result
    - ValidationResult: Immutable outcome of one check

Aggregation:
    - ValidationSession: Lock-protected, append-only result collection
    - ValidationOrchestrator: Runs validators in order against a session

Events and persistence:
    - EventPublisher and the domain event dataclasses
    - SessionRepository, InMemorySessionRepository
"""

from hyprpreflight.validation.types import (
    ValidationStatus,
    Severity,
    ValidationOutcome,
    RequirementName,
    GPUVendor,
)
from hyprpreflight.validation.guidance import UserGuidance
from hyprpreflight.validation.result import ValidationResult, RequirementValue
from hyprpreflight.validation.session import ValidationSession
from hyprpreflight.validation.events import (
    DomainEvent,
    EventPublisher,
    LoggingEventObserver,
    RequirementFailedEvent,
    ValidationBlockedEvent,
    ValidationCompletedEvent,
    ValidationStartedEvent,
    ValidationWarningEvent,
)
from hyprpreflight.validation.orchestrator import ValidationOrchestrator
from hyprpreflight.validation.repository import SessionRepository, InMemorySessionRepository

__all__ = [
    'ValidationStatus',
    'Severity',
    'ValidationOutcome',
    'RequirementName',
    'GPUVendor',
    'UserGuidance',
    'ValidationResult',
    'RequirementValue',
    'ValidationSession',
    'DomainEvent',
    'EventPublisher',
    'LoggingEventObserver',
    'RequirementFailedEvent',
    'ValidationBlockedEvent',
    'ValidationCompletedEvent',
    'ValidationStartedEvent',
    'ValidationWarningEvent',
    'ValidationOrchestrator',
    'SessionRepository',
    'InMemorySessionRepository',
]
