"""Domain layer DI providers."""

from dishka import Scope, provide

from opinion.config import APISettings, AuthSettings
from opinion.domain.repository import (
    ArticleRepository,
    CommentRepository,
    NotificationRepository,
    UserRepository,
)
from opinion.domain.service import (
    CommentService,
    JWTService,
    NotificationService,
    UserService,
)
from opinion.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        article_repository: ArticleRepository,
        user_repository: UserRepository,
        api_settings: APISettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            article_repository=article_repository,
            user_repository=user_repository,
            api_settings=api_settings,
        )

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)
