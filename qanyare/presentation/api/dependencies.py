"""
FastAPI dependency providers

Every request resolves its collaborators from the container stored on
``app.state`` by ``create_app``.
"""

from fastapi import Depends, Request

from qanyare.application.use_cases.analytics_use_case import AnalyticsUseCase
from qanyare.application.use_cases.auth_use_case import AuthUseCase
from qanyare.application.use_cases.status_management_use_case import (
    StatusManagementUseCase,
)
from qanyare.domain.storage import Storage
from qanyare.infrastructure.container.dependency_injection import DependencyContainer


def get_container(request: Request) -> DependencyContainer:
    return request.app.state.container


def get_storage(container: DependencyContainer = Depends(get_container)) -> Storage:
    return container.get_storage()


def get_auth_use_case(
    container: DependencyContainer = Depends(get_container),
) -> AuthUseCase:
    return container.get_auth_use_case()


def get_status_use_case(
    container: DependencyContainer = Depends(get_container),
) -> StatusManagementUseCase:
    return container.get_status_management_use_case()


def get_analytics_use_case(
    container: DependencyContainer = Depends(get_container),
) -> AnalyticsUseCase:
    return container.get_analytics_use_case()
