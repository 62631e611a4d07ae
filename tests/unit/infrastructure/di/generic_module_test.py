"""
Unit tests for GenericModule.

The generic binding hands out an unconfigured ServiceImpl per request.
"""

from injector import Injector

from service_wiring.core.service.qualifiers import GenericService
from service_wiring.core.service.service_impl import ServiceImpl
from service_wiring.infrastructure.di.generic_module import GenericModule


class TestGenericModule:
    """Test cases for the generic service binding."""

    def test_generic_service_is_a_service_impl(self) -> None:
        # Given
        container = Injector([GenericModule()], auto_bind=False)

        # When
        service = container.get(GenericService)

        # Then
        assert service is not None
        assert isinstance(service, ServiceImpl)

    def test_generic_service_has_no_setup_applied(self) -> None:
        # Given
        container = Injector([GenericModule()], auto_bind=False)

        # When
        service = container.get(GenericService)

        # Then
        assert service.applied_setups == ()

    def test_generic_service_is_fresh_per_request(self) -> None:
        # Given
        container = Injector([GenericModule()], auto_bind=False)

        # When
        first = container.get(GenericService)
        second = container.get(GenericService)

        # Then
        assert first is not second
