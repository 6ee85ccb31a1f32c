"""Tests for dependency injection container."""

from types import SimpleNamespace

from fitness_tracker.config import get_settings
from fitness_tracker.di import (
    get_infrastructure_factory,
    get_training_service,
    get_user_service,
)
from fitness_tracker.domain.services import (
    TrainingLifecycleService,
    UserLifecycleService,
)
from fitness_tracker.infrastructure import InfrastructureFactory


def make_request(factory=None):
    state = SimpleNamespace()
    if factory is not None:
        state.infrastructure_factory = factory
    return SimpleNamespace(app=SimpleNamespace(state=state))


def test_get_infrastructure_factory_uses_app_state():
    factory = InfrastructureFactory(provider="memory")

    assert get_infrastructure_factory(make_request(factory), get_settings()) is factory


def test_get_infrastructure_factory_builds_once_when_missing():
    request = make_request()

    first = get_infrastructure_factory(request, get_settings())
    second = get_infrastructure_factory(request, get_settings())

    assert isinstance(first, InfrastructureFactory)
    assert first is second


def test_get_user_service():
    factory = InfrastructureFactory(provider="memory")

    service = get_user_service(factory)

    assert isinstance(service, UserLifecycleService)
    assert service.user_repository is factory.get_user_repository()


def test_get_training_service_uses_user_service_for_owners():
    factory = InfrastructureFactory(provider="memory")
    user_service = get_user_service(factory)

    service = get_training_service(factory, user_service)

    assert isinstance(service, TrainingLifecycleService)
    assert service.user_provider is user_service
    assert service.training_repository is factory.get_training_repository()
