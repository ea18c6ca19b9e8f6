"""Application layer DI providers."""

from dishka import Scope, provide

from opinion.application.usecase.comment import (
    CountCommentsUseCase,
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    ReplyToCommentUseCase,
    UpdateCommentUseCase,
)
from opinion.application.usecase.notification import (
    ListNotificationsUseCase,
    MarkNotificationReadUseCase,
)
from opinion.config import CommentSettings
from opinion.domain.service import CommentService, NotificationService, UserService
from opinion.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService, comment_settings: CommentSettings
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, comment_settings=comment_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_count_comments_use_case(
        self, comment_service: CommentService
    ) -> CountCommentsUseCase:
        """Provide count comments use case."""
        return CountCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
        notification_service: NotificationService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            user_service=user_service,
            notification_service=notification_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_reply_to_comment_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
        notification_service: NotificationService,
    ) -> ReplyToCommentUseCase:
        """Provide reply to comment use case."""
        return ReplyToCommentUseCase(
            comment_service=comment_service,
            user_service=user_service,
            notification_service=notification_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_notification_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkNotificationReadUseCase:
        """Provide mark notification read use case."""
        return MarkNotificationReadUseCase(notification_service=notification_service)
